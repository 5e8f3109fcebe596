# bookconnect/storage.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .models import CatalogDataset


logger = logging.getLogger(__name__)

DATA_FILE = Path(__file__).resolve().parent / "data" / "sample_books.json"


def load_dataset(
    path: Union[str, Path, None] = None, page_size: Optional[int] = None
) -> CatalogDataset:
    """Charge le catalogue (livres, auteurs, genres) depuis un fichier JSON.

    Le fichier est lu une seule fois au démarrage ; le résultat est immuable.
    ``page_size`` remplace la taille de page du fichier lorsqu'elle est fournie.
    """
    data_path = Path(path) if path is not None else DATA_FILE
    try:
        with data_path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Impossible de lire le catalogue %s: %s", data_path, exc)
        raise ValueError(f"Catalogue illisible : {data_path}") from exc

    if not isinstance(raw, dict):
        raise ValueError("Le catalogue doit être un objet JSON.")

    payload: Dict[str, Any] = dict(raw)
    if page_size is not None:
        payload["page_size"] = page_size

    dataset = CatalogDataset.model_validate(payload)
    logger.info(
        "Catalogue chargé depuis %s : %d livres, %d auteurs, %d genres",
        data_path,
        len(dataset.books),
        len(dataset.authors),
        len(dataset.genres),
    )
    return dataset
