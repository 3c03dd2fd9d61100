import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.profiles import routes as profiles_router
from app.goals import routes as goals_router
from app.roadmaps import routes as roadmaps_router
from app.system import routes as system_router
from app.core.config import CORS_ORIGINS, DATABASE_URL, HOST, LOG_LEVEL, PORT
from app.core.database import Base, engine, ensure_database_dir
from app.core.errors import AppError

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="ArtistOS API",
    version="1.0.0",
    description="Backend for ArtistOS: artist profiles, goals and release roadmaps.",
)

# CORS config
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(system_router.router)
app.include_router(profiles_router.router)
app.include_router(goals_router.router)
app.include_router(roadmaps_router.router)


# Errors
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in errors
    ) or "invalid request"
    logger.info(f"Validation error on {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


# DB Tables
@app.on_event("startup")
def create_tables():
    ensure_database_dir(DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    logger.info(f"ArtistOS backend running at http://localhost:{PORT}")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
