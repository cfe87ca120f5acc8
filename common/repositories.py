class ModelRepository:
    """
    Load-by-id / save / find-all access to one model.

    Services only talk to repositories, so a different storage can be swapped in
    without touching the rules around it.
    """
    model = None

    def get_queryset(self):
        return self.model.objects.all()

    def save(self, entity):
        entity.save()
        return entity

    def find_by_id(self, pk):
        if pk is None:
            return None
        return self.get_queryset().filter(pk=pk).first()

    def find_all_by_id(self, ids):
        return list(self.get_queryset().filter(pk__in=list(ids)))

    def find_all(self):
        return list(self.get_queryset())
