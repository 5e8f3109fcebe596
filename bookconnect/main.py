# bookconnect/main.py
from typing import Optional

from fastapi import FastAPI

from .catalog import catalog_router
from .catalog.sessions import SessionStore
from .config import Settings, get_settings
from .logging_conf import setup_logging
from .models import CatalogDataset
from .storage import load_dataset


def create_app(
    settings: Optional[Settings] = None, dataset: Optional[CatalogDataset] = None
) -> FastAPI:
    settings = settings or get_settings()
    logger = setup_logging(settings.log_level)

    if dataset is None:
        dataset = load_dataset(settings.data_file, page_size=settings.page_size)

    app = FastAPI(
        title="Book Connect",
        description=(
            "Catalogue de livres paginé et filtrable, avec fiche détaillée "
            "et thème jour/nuit."
        ),
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.dataset = dataset
    app.state.sessions = SessionStore(dataset, max_sessions=settings.max_sessions)

    # 🔹 Route de base pour tester rapidement
    @app.get("/")
    def health_check():
        return {"status": "ok", "books": len(dataset.books)}

    app.include_router(catalog_router)
    logger.info("Book Connect prêt (%s), taille de page %d", settings.env, dataset.page_size)
    return app
