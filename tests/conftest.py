"""
Fixtures pytest partagees pour les tests du seeder.

Ce module contient les fixtures communes utilisees dans les tests:
- Environnement isole (aucune variable Supabase, aucun .env)
- Variables du store renseignees
- Capture des messages loguru
- Collections d'exemple
"""

from typing import Iterator

import pytest
from loguru import logger

from seeder.core.entities.media import MediaRecord, RecordCollection
from tests.fixtures.store_responses import STORE_KEY, STORE_URL

_ENV_VARS = (
    "SUPABASE_URL",
    "SUPABASE_KEY",
    "VITE_SUPABASE_URL",
    "VITE_SUPABASE_ANON_KEY",
    "SEEDER_REQUEST_TIMEOUT",
    "SEEDER_CONFLICT_COLUMN",
    "SEEDER_CATALOG_FILE",
    "SEEDER_LOG_LEVEL",
    "SEEDER_LOG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """
    Isole chaque test de l'environnement du poste.

    Supprime les variables lues par Settings et se place dans un repertoire
    temporaire pour qu'aucun .env ne soit charge.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def store_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Paire primaire SUPABASE_URL / SUPABASE_KEY renseignee."""
    monkeypatch.setenv("SUPABASE_URL", STORE_URL)
    monkeypatch.setenv("SUPABASE_KEY", STORE_KEY)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Messages loguru emis pendant le test (niveau DEBUG et plus)."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def movie_record() -> MediaRecord:
    """Film type avec toutes les images renseignees."""
    return MediaRecord(
        title="Exemplo Filme 2022",
        description="Filme de teste inserido por script (2022).",
        poster="https://via.placeholder.com/500x750.png?text=Filme+2022",
        backdrop="https://via.placeholder.com/1200x675.png?text=Backdrop+Filme+2022",
        logo_url="",
        year=2022,
        rating=7.2,
        genre=("Drama", "Aventura"),
        stream_url="https://example.com/stream/filme2022.m3u8",
        tmdb_id=1000001,
    )


@pytest.fixture
def movies(movie_record: MediaRecord) -> RecordCollection:
    return RecordCollection(table="movies", records=(movie_record,))


@pytest.fixture
def series() -> RecordCollection:
    return RecordCollection(
        table="series",
        records=(
            MediaRecord(
                title="Exemplo Série 2024",
                description="Série de teste (2024).",
                year=2024,
                rating=7.9,
                genre=("Família", "Aventura"),
                tmdb_id=2000002,
            ),
        ),
    )
