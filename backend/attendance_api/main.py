from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from attendance_api.core.config import Settings, settings as default_settings
from attendance_api.core.logger import get_logger, setup_logging
from attendance_api.db.database import (
    check_connection,
    create_engine,
    create_sessionmaker,
    init_db,
)
from attendance_api.routers import attendance, students

log = get_logger()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)

        if await check_connection(engine) and settings.AUTO_CREATE_TABLES:
            try:
                await init_db(engine)
            except SQLAlchemyError:
                log.exception("Creating tables failed")
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(title="Attendance System", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(OSError)
    async def store_unreachable(request: Request, exc: OSError):
        # raw socket errors from the driver before SQLAlchemy can wrap them
        log.error("Store unreachable on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Database query failed"})

    app.include_router(students.router)
    app.include_router(attendance.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Attendance System Backend is running!"

    return app


app = create_app()


def run():
    setup_logging(default_settings.LOG_LEVEL)
    log.info("Server running on port %s", default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
