from .contact_use_case import ContactUseCase, ContactResponse

__all__ = ["ContactUseCase", "ContactResponse"]
