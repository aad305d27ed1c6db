import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import settings
from .errors import MissingFieldError, ReceiptDecodeError, ReceiptProcessorError
from .routes.receipts import router as receipts_router
from .services.store import ReceiptStore
from .utils.logging import logger, setup_logging


def _describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "invalid request body"

async def receipt_error_handler(request: Request, exc: ReceiptProcessorError):
    if isinstance(exc, MissingFieldError):
        logger.warning("%s %s rejected, missing fields: %s",
                       request.method, request.url.path, ", ".join(exc.fields))
    else:
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

async def request_validation_handler(request: Request, exc: RequestValidationError):
    # body that is not JSON, or has wrong field types, is a decode failure (400, not 422)
    return await receipt_error_handler(request, ReceiptDecodeError(_describe_request_errors(exc)))

def create_app(store: ReceiptStore | None = None) -> FastAPI:
    setup_logging(level=settings.LOG_LEVEL.upper())

    app = FastAPI(title="Receipt Processor",
                  description="Scores purchase receipts and serves their loyalty points",
        version="0.1.0",
        docs_url="/docs",          # Swagger UI
        redoc_url="/redoc",        # ReDoc
        openapi_url="/openapi.json")

    app.state.store = store if store is not None else ReceiptStore()

    app.include_router(receipts_router)
    app.add_exception_handler(ReceiptProcessorError, receipt_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/test", response_class=PlainTextResponse)
    def test_handler():
        return "Test handler is working!\n"

    return app

app = create_app()

def run() -> None:
    logger.info("Starting server on %s:%d...", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
