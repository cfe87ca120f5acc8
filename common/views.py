from rest_framework import status
from rest_framework.response import Response


class CreateWithServiceMixin:
    """Validate input with the write serializer and answer with the read serializer"""
    create_serializer_class = None
    read_serializer_class = None

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return self.create_serializer_class
        return self.read_serializer_class

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = serializer.save()
        return Response(self.read_serializer_class(instance).data, status=status.HTTP_201_CREATED)
