"""Secret resolution for credref.

Submodules:
    keys            -- UrlSecretType, the (URL, Secret type) index key.
    secret_resolver -- SecretResolver ABC and the FluxSecretResolver index.
"""

from credref.resolver.keys import UrlSecretType
from credref.resolver.secret_resolver import FluxSecretResolver, ResolveFunc, SecretResolver

__all__ = ["FluxSecretResolver", "ResolveFunc", "SecretResolver", "UrlSecretType"]
