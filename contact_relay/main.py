#run it with uvicorn contact_relay.main:app --reload
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contact_relay.api.api_router import api_router
from contact_relay.core.config import get_settings
from contact_relay.core.errors import ConfigurationError, ContactValidationError, DeliveryError
from contextlib import asynccontextmanager
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
load_dotenv()

settings = get_settings()

# Set up logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report whether Slack delivery is configured"""
    if settings.is_slack_configured:
        logger.info("🚀 Contact relay started, Slack delivery configured")
    else:
        logger.warning(f"⚠️ Contact relay started without {', '.join(settings.missing_slack_settings())}")
    yield


app = FastAPI(title="Contact Form Relay", version="1.0.0", lifespan=lifespan)

# CORS setup, every /api path is open to any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(ContactValidationError)
async def validation_error_handler(request: Request, exc: ContactValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Validation error",
            "errors": [e.model_dump() for e in exc.errors],
        },
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Server configuration error"},
    )


@app.exception_handler(DeliveryError)
async def delivery_error_handler(request: Request, exc: DeliveryError):
    # Provider detail stays in the server log
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )


@app.get("/api/")
def health_check():
    """Liveness probe."""
    return {"status": "ok", "service": "contact-form"}

