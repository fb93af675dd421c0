import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog_backend.api import auth as auth_api
from blog_backend.api import posts as posts_api
from blog_backend.config import Settings, get_settings
from blog_backend.errors import BlogError, StorageError
from blog_backend.security import Authenticator
from blog_backend.store import DocumentStore

logger = logging.getLogger("blog.app")


async def handle_blog_error(request: Request, exc: BlogError):
    if isinstance(exc, StorageError):
        logger.error("STORAGE_ERROR method=%s path=%s detail=%s", request.method, request.url.path, exc.message)
        return JSONResponse({"message": "Internal server error"}, status_code=exc.status_code)
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def handle_request_validation(request: Request, exc: RequestValidationError):
    return JSONResponse({"message": "Invalid request body"}, status_code=400)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.SERVICE_NAME)
    app.state.settings = settings
    app.state.store = DocumentStore(settings.DB_FILE)
    app.state.authenticator = Authenticator(
        settings.resolve_jwt_secret(),
        algorithm=settings.JWT_ALGORITHM,
        expires_days=settings.JWT_EXPIRES_DAYS,
        rounds=settings.BCRYPT_ROUNDS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(BlogError, handle_blog_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)

    app.include_router(auth_api.router, prefix="/auth", tags=["auth"])
    app.include_router(posts_api.router, prefix="/posts", tags=["posts"])

    @app.get("/")
    async def root():
        return {"ok": True, "service": settings.SERVICE_NAME}

    @app.on_event("startup")
    async def startup():
        app.state.store.load()
        logger.info("API listening on http://%s:%s", settings.HOST, settings.PORT)

    return app


def run() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
