from datetime import date
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.templating import Jinja2Templates

from task_tracker.app.middleware.access_log import AccessLogMiddleware
from task_tracker.app.routes import tasks
from task_tracker.config import Settings, load_settings
from task_tracker.domain.display import percent_label, stats_line, to_view
from task_tracker.domain.errors import TaskValidationError
from task_tracker.domain.filters import TaskFilter
from task_tracker.domain.task_models import SUGGESTED_TYPES, TaskPriority, suggested_years
from task_tracker.infra.task_store_memory import InMemoryTaskStore
from task_tracker.observability.logging import setup_logging
from task_tracker.services.task_service import TaskService

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
logger = logging.getLogger("tasktracker.system")


def create_app(settings: Optional[Settings] = None, store: Optional[InMemoryTaskStore] = None) -> FastAPI:
    settings = settings or load_settings()
    log_path = setup_logging(level=settings.log_level, log_dir=settings.log_dir)
    logger.info("system.start", extra={"category": "system", "event": "system.start", "log_path": str(log_path)})

    app = FastAPI(title=settings.app_title)
    app.add_middleware(AccessLogMiddleware)

    # Static files (CSS/JS)
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    # --- in-memory wiring; state lives as long as the process ---
    app.state.task_service = TaskService(store if store is not None else InMemoryTaskStore())

    app.include_router(tasks.router)

    @app.exception_handler(TaskValidationError)
    async def _task_validation_error(request: Request, exc: TaskValidationError):
        return JSONResponse(status_code=422, content={"kind": exc.kind.value, "detail": exc.message})

    # Pages
    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request, filter: TaskFilter = TaskFilter.all):
        svc: TaskService = request.app.state.task_service
        today = date.today()
        stats = await svc.stats()
        views = [to_view(t, today) for t in await svc.list_tasks(filter)]
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": settings.app_title,
                "views": views,
                "stats": stats,
                "stats_line": stats_line(stats),
                "percent_label": percent_label(stats),
                "current_filter": filter,
                "filters": list(TaskFilter),
                "priorities": list(TaskPriority),
                "types": SUGGESTED_TYPES,
                "years": suggested_years(today),
                "today": today,
            },
        )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
