from decimal import Decimal

from .exceptions import InvalidName, InvalidPrice, InvalidQuantity


def require_non_negative(amount):
    """Reject a missing or negative money amount"""
    if amount is None:
        raise InvalidPrice("Price is required")
    if isinstance(amount, float):
        raise InvalidPrice("Price must be an exact decimal amount, not a float")
    if isinstance(amount, Decimal) and not amount.is_finite():
        raise InvalidPrice(f"Price must be a finite amount: {amount}")
    if amount < 0:
        raise InvalidPrice(f"Price must not be negative: {amount}")
    return amount


def require_quantity(quantity):
    if quantity is None:
        raise InvalidQuantity("Quantity is required")
    if quantity < 0:
        raise InvalidQuantity(f"Quantity must not be negative: {quantity}")
    return quantity


def sum_line_subtotals(lines):
    """
    Sum of unit_price * quantity over (unit_price, quantity) pairs.

    Every quantity is checked before it contributes to the total.
    """
    total = Decimal('0')
    for unit_price, quantity in lines:
        require_quantity(quantity)
        total += unit_price * quantity
    return total


def require_name(name):
    if name is None or name == '':
        raise InvalidName("Name must not be empty")
    return name


def require_displayable(name, profanity_checker):
    """
    Names shown to guests must be non-empty and clean.

    Failures of the checker itself (network errors, timeouts) propagate untouched.
    """
    require_name(name)
    if profanity_checker.contains_profanity(name):
        raise InvalidName(f"Name contains profanity: {name}")
    return name
