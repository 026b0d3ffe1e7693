# main.py
# Role: Application entry point for the wallet ledger.
#       Configures logging, creates database tables,
#       mounts static assets, and registers all route modules.

"""
Main FastAPI app for the personal wallet ledger.

Here we only:
- configure logging
- create the FastAPI app
- set up static files
- create DB tables
- include route modules
"""

import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from db import Base, engine
from logging_setup import configure_logging, get_logger
from settings import get_settings
from app.routes_root import router as root_router
from app.routes_dashboard import router as dashboard_router
from app.routes_transactions import router as transactions_router
from app.routes_api import router as api_router

configure_logging(get_settings().log_level)
log = get_logger("ledger.main")

# -------------------------------------------------------------------
# App & DB setup
# -------------------------------------------------------------------

# Create database tables (only if they don't exist yet).
Base.metadata.create_all(bind=engine)
log.info("[startup] Database ready at %s", engine.url.render_as_string(hide_password=True))

# FastAPI application instance
app = FastAPI(title="Wallet Ledger")

# Serve static files (CSS) from /static
STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "app", "static")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# -------------------------------------------------------------------
# Include routers
# -------------------------------------------------------------------

# Root redirect + health check
app.include_router(root_router)

# Dashboard (overview / online / cash tabs)
app.include_router(dashboard_router)

# Add / delete forms and CSV export
app.include_router(transactions_router)

# JSON API
app.include_router(api_router)
