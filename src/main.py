import logging
import os

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from src.routers import (
    campaign_router,
    content_router,
    domain_router,
    cron_router,
    debug_router,
)
from src.config.logger import setup_logging
from src.utils.exceptions import AnalysisError, CollaboratorError, ConfigurationError

setup_logging()

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o for o in (os.getenv("FRONTEND_ORIGIN") or "").split(",") if o],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600,
)


# Every non-2xx body is {"error": str}
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = f"Invalid request: {field} {first.get('msg', '')}".strip() if field else "Invalid request body"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message, "details": jsonable_errors(exc)},
    )

@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logging.error("Configuration error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})

@app.exception_handler(CollaboratorError)
async def collaborator_error_handler(request: Request, exc: CollaboratorError):
    logging.error("Collaborator error on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"error": exc.message})

@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    logging.warning("Analysis error on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=422, content={"error": exc.message})

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logging.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc) or "Internal server error"})


def jsonable_errors(exc: RequestValidationError) -> list:
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]


main_router = APIRouter(prefix="/api")

main_router.include_router(campaign_router)
main_router.include_router(content_router)
main_router.include_router(domain_router)
main_router.include_router(cron_router)
main_router.include_router(debug_router)

app.include_router(main_router)

@app.get("/")
async def read_root():
    return {"message": "hello world"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
