import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from context import RequestContextFilter, RequestContextMiddleware
from routes.comments import router as comments_router
from routes.discovery import router as discovery_router
from routes.posts import router as posts_router
from services.comments import CommentService
from services.posts import PostService
from services.store import PostStore
from utils.errors import BlogError

load_dotenv()

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(request)s %(message)s",
)
for handler in logging.getLogger().handlers:
    handler.addFilter(RequestContextFilter())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The store lives for the whole process, nothing is persisted
    store = PostStore()

    app.state.store = store
    app.state.post_service = PostService(store)
    app.state.comment_service = CommentService(store)

    yield
    logger.info("Shutting down with %d posts in memory", len(store))


app = FastAPI(title="Blog API", lifespan=lifespan)

# middleware to set request context
app.add_middleware(RequestContextMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BlogError)
async def blog_error_handler(request: Request, exc: BlogError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # unknown paths and unsupported methods look the same to clients
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": "Resource not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = set()
    for err in exc.errors():
        # json_invalid errors point at a byte offset, not a field
        if err["type"] == "json_invalid":
            fields.add("body")
        else:
            fields.add(".".join(str(part) for part in err["loc"][1:]) or str(err["loc"][0]))
    fields = sorted(fields)
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {', '.join(fields)}"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@app.get("/")
async def root():
    return {"message": "Welcome to the Blog API"}


# Include routers
app.include_router(posts_router, prefix="/posts", tags=["posts"])
app.include_router(comments_router, prefix="/comments", tags=["comments"])
app.include_router(discovery_router, tags=["discovery"])


if __name__ == "__main__":
    logger.info("Server is running on port %d", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
