from dotenv import load_dotenv
load_dotenv()
from fastapi import FastAPI
from core.config import get_settings
from core.database import init_db
import uvicorn
import logging
from api.auth_api import router as auth_router
from api.users_api import router as users_router
from api.categories_api import router as categories_router
from api.tasks_api import router as tasks_router
from api.health_api import health_api_router

settings = get_settings()

# Service loggers are named after their class; API loggers after their module
APPLICATION_LOGGERS = [
    "CORE_DATABASE",
    "CORE_SECURITY",
    "AUTH_API",
    "USERS_API",
    "TaskService",
    "CategoryService",
    "AuthService",
    "UserService",
]

app = FastAPI(
    title=settings.app_name,
    description="Tasks and categories scoped to the signed-in user, with profile enrichment",
)


@app.on_event("startup")
def on_startup():
    uvicorn_handlers = logging.getLogger("uvicorn").handlers
    for logger_name in APPLICATION_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.INFO)
        if not logger.handlers and uvicorn_handlers:
            logger.addHandler(uvicorn_handlers[0])

    init_db()


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(categories_router)
app.include_router(tasks_router)
app.include_router(health_api_router)


@app.get("/")
async def root():
    return {"message": "Welcome to the Task Manager API"}


if __name__ == "__main__":
    if settings.environment.lower() == "production":
        uvicorn.run("main:app", host="0.0.0.0", port=3000, workers=4)
    else:
        # reload cannot be combined with several workers
        uvicorn.run("main:app", host="0.0.0.0", port=3000, reload=True)
