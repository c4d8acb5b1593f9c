from .bcrypt_hasher import BcryptHasher
from .jwt_encrypter import JwtEncrypter

__all__ = ["BcryptHasher", "JwtEncrypter"]
