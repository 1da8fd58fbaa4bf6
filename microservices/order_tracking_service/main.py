"""
Order Tracking Microservice

Responsibilities:
- Order lookup by order number and/or email against the order store
- Tracking number extraction from fulfillment records
- Customer-facing shipping status and button-control hints
- Per-client lookup throttling
"""

from fastapi import FastAPI, HTTPException, Depends, Request, status, Path
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from core.config_manager import ConfigManager
from core.logger import setup_service_logger

from .factory import create_order_tracking_service
from .models import OrderDebugResponse, TrackOrderRequest, TrackingResponse, TrackingServiceStatus
from .order_tracking_service import OrderTrackingService, error_response
from .protocols import (
    InvalidEmailError, InvalidOrderNumberError, MissingCriteriaError,
    RateLimitedError, TrackingError, UpstreamUnavailableError
)
from .routes_registry import SERVICE_METADATA, get_routes_summary

# Initialize configuration
config_manager = ConfigManager("order_tracking_service")
config = config_manager.get_service_config()
tracking_config = config_manager.get_tracking_config()

# Setup loggers (use actual service name)
app_logger = setup_service_logger("order_tracking_service")
logger = app_logger


class OrderTrackingMicroservice:
    """Order tracking microservice core class"""

    def __init__(self):
        self.tracking_service: Optional[OrderTrackingService] = None
        self.debug_endpoints_enabled = False
        self.started_at = time.monotonic()

    async def initialize(self, tracking_service: Optional[OrderTrackingService] = None):
        """Initialize the microservice"""
        self.started_at = time.monotonic()
        self.debug_endpoints_enabled = tracking_config.debug_endpoints_enabled

        if tracking_service is not None:
            self.tracking_service = tracking_service
            logger.info("Order tracking microservice initialized")
            return

        problems = config_manager.validate()
        for problem in problems:
            logger.error(f"Configuration problem: {problem}")
        if not tracking_config.upstream_configured:
            logger.error("Order store not configured, tracking lookups will be rejected")
            return

        self.tracking_service = create_order_tracking_service(config_manager)
        logger.info("Order tracking microservice initialized")

    async def shutdown(self):
        """Shutdown the microservice"""
        try:
            if self.tracking_service:
                await self.tracking_service.close()
            logger.info("Order tracking microservice shutdown completed")
        except Exception as e:
            logger.error(f"Error during shutdown: {e}")
        finally:
            self.tracking_service = None

    @property
    def uptime_seconds(self) -> float:
        return round(time.monotonic() - self.started_at, 3)


# Global microservice instance
tracking_microservice = OrderTrackingMicroservice()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    await tracking_microservice.initialize()
    logger.info(f"{config.service_name} started on port {config.service_port} ({config.environment})")

    yield

    await tracking_microservice.shutdown()


# Create FastAPI application
app = FastAPI(
    title="Order Tracking Service",
    description="Order lookup and shipping status microservice",
    version=SERVICE_METADATA["version"],
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=tracking_config.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
)


def get_client_id(request: Request) -> str:
    """Caller identity for throttling: edge-supplied IP first, then the peer"""
    connecting_ip = request.headers.get("CF-Connecting-IP")
    if connecting_ip:
        return connecting_ip.strip()
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path} - IP: {get_client_id(request)}")
    return await call_next(request)


# Dependency injection
def get_tracking_service() -> OrderTrackingService:
    """Get tracking service instance"""
    if not tracking_microservice.tracking_service:
        raise UpstreamUnavailableError("Order tracking is not available right now")
    return tracking_microservice.tracking_service


# Health check endpoints
@app.get("/health")
async def health_check():
    """Service health check"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "version": SERVICE_METADATA["version"],
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": tracking_microservice.uptime_seconds,
        "environment": config.environment
    }


@app.get("/health/detailed", response_model=TrackingServiceStatus)
async def detailed_health_check():
    """Detailed health check with order store reachability"""
    service = tracking_microservice.tracking_service
    reachable = None
    if service:
        try:
            reachable = await service.health_check()
        except Exception as e:
            logger.warning(f"Order store health check failed: {e}")
            reachable = False
    return TrackingServiceStatus(
        status="healthy" if service else "degraded",
        version=SERVICE_METADATA["version"],
        upstream_configured=service is not None,
        upstream_reachable=reachable,
        timestamp=datetime.now(timezone.utc)
    )


# Tracking endpoints

@app.post("/api/v1/track", response_model=TrackingResponse)
async def track_order(
    body: TrackOrderRequest,
    request: Request,
    tracking_service: OrderTrackingService = Depends(get_tracking_service)
):
    """Look up the shipping status of an order"""
    try:
        return await tracking_service.track(
            order_number=body.order_number,
            email=body.email,
            client_id=get_client_id(request)
        )
    except TrackingError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error in track_order: {type(e).__name__}: {e}")
        raise TrackingError()


@app.get("/api/v1/debug/{order_number}", response_model=OrderDebugResponse)
async def debug_order(
    order_number: str = Path(..., description="Order number"),
    tracking_service: OrderTrackingService = Depends(get_tracking_service)
):
    """Raw tracking fields of an order's fulfillments"""
    if not tracking_microservice.debug_endpoints_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    try:
        return await tracking_service.debug_order(order_number)
    except TrackingError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error in debug_order: {type(e).__name__}: {e}")
        raise TrackingError()


# Service info endpoints

@app.get("/api/v1/tracking/info")
async def get_service_info():
    """Get order tracking service information"""
    return {
        "service": SERVICE_METADATA["service_name"],
        "version": SERVICE_METADATA["version"],
        "port": config.service_port,
        "status": "operational" if tracking_microservice.tracking_service else "degraded",
        "capabilities": SERVICE_METADATA["capabilities"],
        "rate_limit": {
            "max_requests": tracking_config.rate_limit_max_requests,
            "window_seconds": tracking_config.rate_limit_window_seconds
        },
        "routes": get_routes_summary(tracking_microservice.debug_endpoints_enabled)
    }


# Error handlers
@app.exception_handler(TrackingError)
async def tracking_error_handler(request: Request, exc: TrackingError):
    headers = None
    if isinstance(exc, RateLimitedError) and exc.retry_after:
        headers = {"Retry-After": str(exc.retry_after)}
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc).model_dump(mode="json"),
        headers=headers
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    fields = {str(err.get("loc", ())[-1]) for err in exc.errors() if err.get("loc")}
    if fields & {"orderNumber", "order_number"}:
        error = InvalidOrderNumberError()
    elif "email" in fields:
        error = InvalidEmailError()
    else:
        error = MissingCriteriaError(
            "Request body must be a JSON object with orderNumber and/or email"
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(error).model_dump(mode="json")
    )


if __name__ == "__main__":
    # Print configuration summary for debugging
    config_manager.print_config_summary()

    uvicorn.run(
        "microservices.order_tracking_service.main:app",
        host=config.service_host,
        port=config.service_port,
        reload=config.debug,
        log_level=config.log_level.lower()
    )
