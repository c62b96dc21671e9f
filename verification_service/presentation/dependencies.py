from verification_service.application.static_codes import (
    StaticVerificationCodeManager,
)
from verification_service.domain.ports.static_code_store import StaticCodeStorePort
from verification_service.infrastructure.redis_cache.pool import get_redis
from verification_service.infrastructure.redis_cache.static_code_store import (
    RedisStaticCodeStore,
)
from verification_service.settings import get_settings


def get_static_code_store() -> StaticCodeStorePort:
    return RedisStaticCodeStore(
        get_redis(), key_prefix=get_settings().static_code_key_prefix
    )


def get_static_code_manager() -> StaticVerificationCodeManager:
    return StaticVerificationCodeManager(get_static_code_store())
