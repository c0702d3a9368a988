from .credential_store import CredentialStore, SecretCredentialStore

__all__ = ["CredentialStore", "SecretCredentialStore"]
