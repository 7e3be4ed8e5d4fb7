from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.config import settings
from src.routers import general, books
from src.cors_config import get_cors_config
import logging

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Library API",
    description="""
    A small library-management service for keeping a catalogue of books.

    ## Features

    * **Registration**: Add books, each identified by a unique ISBN
    * **Lookup**: Fetch a book by its id or by its ISBN
    * **Maintenance**: Update a book's title and author, or remove it
    * **Filtering**: Page through the catalogue filtering by title, author or ISBN
    """,
    version="1.0.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
    openapi_tags=[
        {
            "name": "general",
            "description": "General endpoints for health checks",
        },
        {
            "name": "books",
            "description": "Register, look up, update, delete and filter books",
        },
    ],
)

# Configure CORS
cors_config = get_cors_config(allow_origins=settings.cors_allow_origins)
app.add_middleware(CORSMiddleware, **cors_config)

# Include routers
app.include_router(general.router)
app.include_router(books.router)
