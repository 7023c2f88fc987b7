# workout_log/main.py
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from workout_log.deps.service import get_store
from workout_log.errors import StorageError
from workout_log.routers.day import router as day_router
from workout_log.routers.sets import router as sets_router
from workout_log.routers.workouts import router as workouts_router
from workout_log.services import WorkoutService
from workout_log.settings import Settings, get_settings
from workout_log.store import RecordStore

log = logging.getLogger("uvicorn")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = RecordStore(settings.DATABASE_URL, echo=settings.DB_ECHO)
        service = WorkoutService(store)
        app.state.record_store = store
        app.state.workout_service = service
        try:
            await store.open()
            await service.reload()
            yield
        finally:
            await store.close()

    app = FastAPI(
        title="Workout Log API",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "day", "description": "Selected day, reload and completion"},
            {"name": "workouts", "description": "Workouts of the selected day"},
            {"name": "sets", "description": "Sets per workout"},
        ],
    )

    # CORS (relax for local dev; tighten origins in prod via env)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOW_ORIGINS.split(","),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id_and_log(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = req_id
        log.info("rid=%s %s %s -> %s in %.1fms",
                 req_id, request.method, request.url.path, response.status_code, duration_ms)
        return response

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        log.error("storage error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "storage unavailable"})

    @app.get("/")
    def root():
        return {"ok": True, "name": "Workout Log API"}

    @app.get("/ping")
    def ping():
        return {"pong": True}

    @app.get("/healthz")
    async def healthz(store: RecordStore = Depends(get_store)):
        # Quick DB sanity check
        try:
            await store.ping()
            return {"status": "ok"}
        except StorageError as e:
            return {"status": "degraded", "error": str(e)}

    @app.get("/version")
    def version():
        return {"version": settings.API_VERSION}

    # Routers
    app.include_router(day_router)
    app.include_router(workouts_router)
    app.include_router(sets_router)
    return app


app = create_app()
