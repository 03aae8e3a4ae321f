import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from spellfix.common.config import settings
from spellfix.spellcheck.corrector import CorrectionOutcome, accept_first, correct_text
from spellfix.spellcheck.engine import CheckResult, Correction, SpellCheckerEngine

logger = logging.getLogger(__name__)


class CorrectionModel(BaseModel):
    misspelled: str
    suggestion: str


class CheckResponse(BaseModel):
    misspelled: list[str]
    corrections: list[CorrectionModel]


class AddWordRequest(BaseModel):
    word: str = Field(..., min_length=1)


class AddWordResponse(BaseModel):
    word: str
    added: bool


class PurgeResponse(BaseModel):
    purged: int


class CorrectRequest(BaseModel):
    text: str
    choices: dict[int, int] = Field(default_factory=dict)


class CorrectResponse(BaseModel):
    text: str
    changed: bool
    applied: list[CorrectionModel]


class HealthResponse(BaseModel):
    words: int
    cached: int


def _corrections(items: list[Correction]) -> list[CorrectionModel]:
    return [CorrectionModel(misspelled=c.misspelled, suggestion=c.suggestion) for c in items]


class SpellcheckService:
    def __init__(self, *, dictionary_path: Path | None = None, engine: SpellCheckerEngine | None = None) -> None:
        self.dictionary_path = dictionary_path or Path(settings.dictionary_path)
        self.engine = engine or SpellCheckerEngine(
            max_distance=settings.max_edit_distance,
            deadline_s=settings.suggest_deadline_s,
        )

    def load(self) -> bool:
        loaded = self.engine.load_dictionary(self.dictionary_path)
        if not loaded:
            logger.warning("serving with an empty dictionary path=%s", self.dictionary_path)
        return loaded

    def check(self, q: str) -> CheckResponse:
        result: CheckResult = self.engine.check_text(q)
        return CheckResponse(misspelled=result.misspelled, corrections=_corrections(result.corrections))

    def add_word(self, word: str) -> AddWordResponse:
        normalized = self.engine.normalize_word(word)
        added = self.engine.insert(word)
        return AddWordResponse(word=normalized, added=added)

    def purge(self) -> PurgeResponse:
        return PurgeResponse(purged=self.engine.purge())

    def correct(self, text: str, choices: dict[int, int]) -> CorrectResponse:
        def _choose(index, token, corrections) -> int:
            if index in choices:
                return choices[index]
            return accept_first(index, token, corrections)

        outcome: CorrectionOutcome = correct_text(text, self.engine, _choose)
        return CorrectResponse(text=outcome.text, changed=outcome.changed, applied=_corrections(outcome.applied))

    def health(self) -> HealthResponse:
        return HealthResponse(words=len(self.engine.dictionary), cached=len(self.engine.cache))


spellcheck_service = SpellcheckService()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    spellcheck_service.load()
    yield


app = FastAPI(title="Spellfix API", lifespan=lifespan)


def _bounded_text(text: str) -> str:
    if len(text) > settings.max_text_chars:
        raise HTTPException(status_code=413, detail=f"text longer than {settings.max_text_chars} characters")
    return text


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return spellcheck_service.health()


@app.get("/check", response_model=CheckResponse)
def check(q: str = Query(..., min_length=1)) -> CheckResponse:
    return spellcheck_service.check(_bounded_text(q))


@app.post("/words", response_model=AddWordResponse)
def add_word(payload: AddWordRequest) -> AddWordResponse:
    try:
        return spellcheck_service.add_word(payload.word)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/cache/purge", response_model=PurgeResponse)
def purge_cache() -> PurgeResponse:
    return spellcheck_service.purge()


@app.post("/correct", response_model=CorrectResponse)
def correct(payload: CorrectRequest) -> CorrectResponse:
    return spellcheck_service.correct(_bounded_text(payload.text), payload.choices)
