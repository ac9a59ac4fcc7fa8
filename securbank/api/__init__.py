"""
SecurBank API Application Factory
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from .. import __version__
from ..config import get_config
from ..exceptions import InvalidArgumentError
from ..logging_config import setup_logging
from .accounts import router as accounts_router
from .finance import router as finance_router
from .customers import router as customers_router
from .pdf import router as pdf_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    config = get_config()
    setup_logging(config.log_level, "securbank", config.log_format, config.log_file)

    app = FastAPI(
        title="SecurBank Services API",
        description="Account number utilities and XDP-to-PDF generation",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        return JSONResponse(
            status_code=400,
            content={"error": str(exc), "code": exc.code}
        )

    # Include routers
    app.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])
    app.include_router(finance_router, prefix="/finance", tags=["Finance"])
    app.include_router(customers_router, prefix="/customers", tags=["Customers"])
    app.include_router(pdf_router, prefix="/bin/securbank", tags=["PDF"])

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "securbank_api",
            "version": __version__
        }

    # Root endpoint
    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "SecurBank Services API",
            "version": __version__,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "accounts": "/accounts",
                "finance": "/finance",
                "customers": "/customers",
                "generate-pdf": "/bin/securbank/generate-pdf",
            }
        }

    return app


app = create_app()


def run_server(host: str = "0.0.0.0", port: int = 8090, debug: bool = False,
               workers: int = 1):
    """Run the FastAPI server"""
    uvicorn.run(
        "securbank.api:app",
        host=host,
        port=port,
        reload=debug,
        workers=workers,
        log_level="info"
    )
