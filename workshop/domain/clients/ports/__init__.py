from .client_directory import ClientContact, ClientDirectory

__all__ = ["ClientContact", "ClientDirectory"]
