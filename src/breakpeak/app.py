import uvicorn

from fastapi import FastAPI
from breakpeak.env import HOST, PORT, LOG_LEVEL
from breakpeak.logging_config import configure_logging
from breakpeak.router import BreaksRouter
from breakpeak.service import BreakAccumulatorService


def create_app() -> FastAPI:
    app = FastAPI(title="Break Peak API")
    app.state.accumulator = BreakAccumulatorService()
    app.include_router(BreaksRouter)

    @app.get("/")
    async def root():
        return {"message": "Break peak tracker is running"}

    return app


app = create_app()


def main():
    configure_logging()
    uvicorn.run(
        "breakpeak.app:app",
        host=HOST,
        port=PORT,
        reload=False,
        log_level=LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
