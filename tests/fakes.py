from common.exceptions import DeliveryDispatchError


class FakeProfanityChecker:
    """Flags any name containing one of a few fixed words"""
    words = ('bitch', 'shit', 'damn')

    def contains_profanity(self, text):
        lowered = text.lower()
        return any(word in lowered for word in self.words)


class FakeDeliveryDispatcher:
    """Records delivery requests; set `fail` to simulate an unreachable rider service"""
    requests = []
    fail = False

    def request_delivery(self, order_id, delivery_address, amount):
        if self.fail:
            raise DeliveryDispatchError(f"rider service down for order {order_id}")
        self.requests.append((order_id, delivery_address, amount))

    @classmethod
    def reset(cls):
        cls.requests = []
        cls.fail = False
