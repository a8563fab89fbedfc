"""
NGO Nearby Places API - FastAPI Backend

Geocodes NGO locations and returns the points of interest around them,
both as structured results and as a GeoJSON FeatureCollection for map
renderers.
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import api_settings
from api.routers import health_router, search_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Initialize FastAPI
app = FastAPI(
    title=api_settings.API_TITLE,
    description=api_settings.API_DESCRIPTION,
    version=api_settings.API_VERSION,
)

# Configure CORS for map frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=api_settings.CORS_ORIGINS,
    allow_credentials=api_settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=api_settings.CORS_ALLOW_METHODS,
    allow_headers=api_settings.CORS_ALLOW_HEADERS,
)

app.include_router(health_router)
app.include_router(search_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
