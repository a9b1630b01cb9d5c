from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from szdelays.api.v1.routes.delays import legacy_router as delays_legacy_router
from szdelays.api.v1.routes.delays import router as delays_router
from szdelays.api.v1.routes.health import router as health_router
from szdelays.core.logging import configure_logging_if_needed

configure_logging_if_needed()

app = FastAPI(title="SZ Delay Statistics API")

# Public read-only data: any origin may call the GET endpoints.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/v1")
app.include_router(delays_router)
app.include_router(delays_legacy_router)
