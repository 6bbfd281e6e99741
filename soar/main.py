from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from soar import config
from soar.api.routes import router
from soar.logging_config import configure_logging

configure_logging()

app = FastAPI(
    title="SOAR Architecture Viewer API",
    version="0.1.0",
)

# Middleware first, routes after
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
