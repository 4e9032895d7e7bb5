# app/main.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
from contextlib import asynccontextmanager

from app.config import settings
from app.database import db
from app.api.routes import auth as auth_routes
from app.api.routes import cart as cart_routes
from app.api.routes import products as product_routes
from app.api.routes import users as user_routes
from app.middleware.cors_config import configure_cors
from app.middleware.security_headers import add_security_headers

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context: run startup checks before the app starts serving.
    """
    db.data_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Using data directory %s", db.data_dir.resolve())

    # without a catalog every add-to-cart is rejected
    products_path = db._file_path("products")
    if not products_path.exists():
        logger.warning("Products file not found at %s; run scripts/seed_data.py to create a catalog.", products_path)
    else:
        logger.info("Found products file: %s", products_path)

    yield
    logger.info("Shutting down Storefront Cart API")


app = FastAPI(title="Storefront Cart API", version="0.1.0", lifespan=lifespan)
configure_cors(app)
add_security_headers(app)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Malformed request bodies are answered with 400 and the first validation message.
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


app.include_router(auth_routes.router)
app.include_router(user_routes.router)
app.include_router(product_routes.router)
app.include_router(cart_routes.router)


@app.get("/", tags=["root"])
async def root():
    return {"status": "ok", "service": "Storefront Cart API"}
