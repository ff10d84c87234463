import logging
from odmantic import AIOEngine

logger = logging.getLogger(__name__)


async def check_database_health(engine: AIOEngine) -> bool:
    """Verificar que MongoDB responda a un ping"""
    try:
        await engine.client.admin.command("ping")
        logger.debug("✅ MongoDB respondiendo")
        return True
    except Exception as e:
        logger.warning(f"❌ Error en MongoDB: {e}")
        return False
