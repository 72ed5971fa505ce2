"""
Multimodal Chat Proxy - FastAPI application forwarding chat turns to OpenRouter.
Accepts a prompt with optional image/audio attachments and returns the assistant's reply.
"""
from fastapi import FastAPI
from contextlib import asynccontextmanager
from config import Config
from routes import proxy
from cors import CORSHeadersMiddleware
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app_logger.info(f"{Config.APP_TITLE} ready, model {Config.OPENROUTER_MODEL}")
    yield
    await HTTPClientManager.close_all()

app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan)

app.add_middleware(CORSHeadersMiddleware, headers=Config.cors_headers())

#root endpoint
@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"message": "Multimodal Chat Proxy is running"}

app.include_router(proxy.router, tags=["chat"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
