# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from starlette.exceptions import HTTPException as StarletteHTTPException

from gestion_entretiens import config
from gestion_entretiens.database import init_db, ping_db
from gestion_entretiens.errors import ApiError
from gestion_entretiens.routers import (
    auth_router,
    employees_router,
    entretiens_router,
    notes_router,
    objectifs_router,
    templates_router,
)
from gestion_entretiens.utils import error_resp

logger = logging.getLogger("uvicorn.error")

PUBLIC_PATHS = ("/api/auth/login", "/api/auth/request-code", "/api/auth/verify-code")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database (tables + sample data)
    init_db()
    yield


app = FastAPI(
    title="Gestion Entretiens API",
    version="1.0.0",
    description="Suivi des entretiens, notes et objectifs des équipes",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router.router)
app.include_router(employees_router.router)
app.include_router(entretiens_router.router)
app.include_router(notes_router.router)
app.include_router(objectifs_router.templates_router)
app.include_router(objectifs_router.assignes_router)
app.include_router(templates_router.router)


# Exception handlers to return the {"error": ...} shape
@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_resp(exc.message, exc.status_code, exc.code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    msg = "Données invalides"
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        msg = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return error_resp(msg, 400, "ValidationError")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # exc.detail may be dict or str
    msg = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_resp(msg or "Error", exc.status_code)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return error_resp("Erreur serveur", 500)


@app.get("/")
def root():
    return {"message": "API Gestion Entretiens - Prête !"}


@app.get("/health")
def health_check():
    return {"status": "healthy", "db_connected": ping_db()}


# -------------------------
# Custom OpenAPI (Bearer)
# -------------------------
def custom_openapi():
    # Return cached schema if already generated
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=getattr(app, "description", None),
        routes=app.routes,
    )

    openapi_schema.setdefault("components", {}).setdefault("securitySchemes", {})
    openapi_schema["components"]["securitySchemes"]["BearerAuth"] = {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    }

    # everything under /api except the signup/login endpoints needs the token
    for path, path_item in openapi_schema.get("paths", {}).items():
        if not path.startswith("/api/") or path in PUBLIC_PATHS:
            continue
        for method, operation in path_item.items():
            if not isinstance(operation, dict):
                continue
            security = operation.setdefault("security", [])
            if {"BearerAuth": []} not in security:
                security.append({"BearerAuth": []})

    app.openapi_schema = openapi_schema
    return app.openapi_schema


# Attach custom openapi to the app so /docs shows the Authorize button
app.openapi = custom_openapi


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("gestion_entretiens.main:app", host="0.0.0.0", port=config.PORT)
