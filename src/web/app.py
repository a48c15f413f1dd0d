"""
FastAPI application serving the feedback intake form and dashboard.
"""

from functools import partial
from typing import Callable, Iterator, Optional
import logging

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from src.config.settings import Settings
from src.data_access.feedback_store import FeedbackStore
from src.agents.llm_agent import FeedbackClassifier
from src.models.errors import StoreFailure
from src.pipelines.aggregate import summarize
from src.pipelines.ingest import IngestionPipeline
from src.web.dashboard import render_dashboard

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Settings] = None,
    store_factory: Optional[Callable[[], FeedbackStore]] = None,
    classifier: Optional[FeedbackClassifier] = None,
) -> FastAPI:
    """
    Build the web application.

    Args:
        config: Application settings (loaded from the environment if omitted)
        store_factory: Callable returning a fresh store per request
        classifier: Sentiment classifier shared by all requests

    Returns:
        Configured FastAPI app
    """
    if store_factory is None or classifier is None:
        config = config or Settings()
    if store_factory is None:
        store_factory = partial(FeedbackStore, config)
    if classifier is None:
        classifier = FeedbackClassifier(config)

    app = FastAPI(title="Feedback Intelligence", version="0.1.0")
    app.state.store_factory = store_factory
    app.state.classifier = classifier

    def get_store() -> Iterator[FeedbackStore]:
        store = app.state.store_factory()
        try:
            yield store
        finally:
            store.close()

    @app.post("/")
    def submit_feedback(
        request: Request,
        feedback: Optional[str] = Form(None),
        store: FeedbackStore = Depends(get_store),
    ) -> RedirectResponse:
        """Classify and store a feedback submission, then reload the page."""
        pipeline = IngestionPipeline(store, app.state.classifier)
        pipeline.ingest(feedback)
        return RedirectResponse(url=request.url.path, status_code=303)

    @app.get("/", response_class=HTMLResponse)
    def dashboard(store: FeedbackStore = Depends(get_store)) -> HTMLResponse:
        """Render every stored record with the sentiment totals."""
        try:
            records = store.list_all()
        except StoreFailure as e:
            logger.error(f"Could not load feedback for dashboard: {e}")
            raise HTTPException(status_code=500, detail="Could not load feedback")

        counts = summarize(records)
        return HTMLResponse(render_dashboard(records, counts))

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


def main():
    """Run the dashboard with uvicorn."""
    import uvicorn

    config = Settings()
    logging.basicConfig(
        level=config.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    uvicorn.run(create_app(config), host=config.app_host, port=config.app_port)


if __name__ == "__main__":
    main()
