"""
웹 애플리케이션

실행:
    python -m web.app
    uvicorn web.app:app --reload
"""
import uvicorn
from fastapi import FastAPI

from core.config import Config
from utils.logger import logger

from .errors import register_exception_handlers
from .routes import router


def create_app(config: Config = None) -> FastAPI:
    """FastAPI 앱 생성"""
    config = config or Config()

    app = FastAPI(title="Time Bank National ID Service")
    app.state.config = config
    register_exception_handlers(app)
    app.include_router(router)

    @app.get("/health", tags=["health"])
    def health():
        """서비스 상태"""
        return {
            "status": "ok",
            "registry": config.is_registry_configured(),
        }

    logger.info(
        f"앱 생성 (등록부: {'설정됨' if config.is_registry_configured() else '미설정'}, "
        f"로그: {config.get_log_file()})"
    )
    return app


app = create_app()


if __name__ == "__main__":
    config = app.state.config
    uvicorn.run(app, host=config.get_host(), port=config.get_port())
