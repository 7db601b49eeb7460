from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from daily_movie.applications.interfaces.dtos.message import Message
from daily_movie.infrastructure.config.container import AppContainer
from daily_movie.infrastructure.config.settings import NotificationSettings, Settings
from daily_movie.infrastructure.logging.logger import setup_logging
from daily_movie.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, get_shared_engine
from daily_movie.presentation.routers import deeplink, directors, onboarding, recommendations

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    container = AppContainer.build(Settings(), NotificationSettings(), get_engine(), get_shared_engine())
    app.state.container = container
    await container.start()
    try:
        yield
    finally:
        await container.stop()
        await dispose_engine()


app = FastAPI(title="Daily Movie", lifespan=lifespan)

app.include_router(directors.router)
app.include_router(onboarding.router)
app.include_router(recommendations.router)
app.include_router(deeplink.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Daily Movie"}
