from fastapi import FastAPI
from routes import translation
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
import uvicorn

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Load environment variables with defaults
PORT = int(os.environ.get("PORT", 8080))
ALLOWED_ORIGINS = os.environ.get("ALLOWED_ORIGINS", "*").split(",")

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(translation.router, prefix="/api")

@app.get("/")
def home():
    return {"message": "Welcome to the Review Translation API", "endpoint": "translate.googleapis.com"}

@app.get("/healthcheck")
def healthcheck():
    """Endpoint for health checks"""
    return {"status": "healthy", "version": "1.0.0", "env": os.environ.get("APP_ENV", "local")}

@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting application on port {PORT}")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=False)
