"""FastAPI routes forwarding history to the remote coach.

Routes:
    GET  /api/recommend  usage hint
    POST /api/recommend  {history: [...]} -> {recommendations, chosen, plan}
    POST /api/voice      {text, voice}    -> audio/mpeg

Every failure is answered with ``{"error": message}``: 400 for bad request
bodies, 500 for missing configuration and coach failures.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from coach_client import CoachClient, CoachClientError, CoachConfigError
from coach_client.credentials import resolve_api_key
from coach_engine.engine import CoachEngine
from coach_engine.selection import HeuristicGroupSelector, RemoteGroupSelector
from coach_engine.serialization import entries_from_list, result_to_dict

from coach_server.config import STRATEGY_HEURISTIC, Settings

logger = logging.getLogger(__name__)

RECOMMEND_USAGE = "POST { history: WorkoutEntry[] } to get recommendations"

ClientFactory = Callable[[Settings], CoachClient]


class BadRequest(Exception):
    """The request body is missing, not JSON, or has the wrong shape."""


def default_client_factory(settings: Settings) -> CoachClient:
    return CoachClient(
        api_key=resolve_api_key(settings.openai_api_key or None),
        chat_model=settings.chat_model,
        tts_model=settings.tts_model,
    )


def build_engine(settings: Settings, client_factory: ClientFactory) -> CoachEngine:
    """Engine for the configured strategy. Remote needs an API key."""
    if settings.strategy == STRATEGY_HEURISTIC:
        return CoachEngine(HeuristicGroupSelector())
    client = client_factory(settings)
    return CoachEngine(RemoteGroupSelector(
        client, settings.athlete_name, history_cap=settings.history_cap,
    ))


async def read_json_object(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        raise BadRequest("Request body is empty")
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise BadRequest(f"Request body is not valid JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object")
    return body


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def create_app(
    settings: Settings | None = None,
    client_factory: ClientFactory | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Runtime settings (default: from the environment).
        client_factory: Builds the CoachClient per request; tests inject a
            fake here.
    """
    settings = settings or Settings.from_env()
    factory = client_factory or default_client_factory
    app = FastAPI(title="Lift Coach")

    @app.get("/api/recommend")
    def recommend_usage() -> dict[str, Any]:
        return {"ok": True, "usage": RECOMMEND_USAGE}

    @app.post("/api/recommend")
    async def recommend(request: Request) -> Response:
        try:
            body = await read_json_object(request)
            raw_history = body.get("history", [])
            if not isinstance(raw_history, list):
                raise BadRequest("history must be a list of workout entries")
            history = entries_from_list(raw_history[: settings.history_cap])
        except (BadRequest, ValueError) as exc:
            return error_response(str(exc), 400)

        try:
            engine = build_engine(settings, factory)
            result = await run_in_threadpool(engine.recommend, history)
            response = JSONResponse(result_to_dict(result))
        except CoachConfigError as exc:
            return error_response(str(exc), 500)
        except CoachClientError as exc:
            logger.error("Coach recommendation failed: %s", exc)
            return error_response(str(exc) or "Recommendation failed", 500)
        except Exception:
            logger.exception("Recommendation failed")
            return error_response("Recommendation failed", 500)

        logger.info(
            "Recommended %s (%s) from %d entries",
            result.plan.group,
            result.source.value,
            len(history),
        )
        return response

    @app.post("/api/voice")
    async def voice(request: Request) -> Response:
        try:
            body = await read_json_object(request)
        except BadRequest as exc:
            return error_response(str(exc), 400)

        try:
            client = factory(settings)
        except CoachConfigError as exc:
            return error_response(str(exc), 500)
        except Exception:
            logger.exception("TTS client setup failed")
            return error_response("TTS failed", 500)

        text = body.get("text")
        voice_id = body.get("voice") or settings.default_voice
        if not text or not isinstance(text, str):
            return error_response("Missing text", 400)
        if not isinstance(voice_id, str):
            return error_response("voice must be a string", 400)

        try:
            audio = await run_in_threadpool(client.synthesize_speech, text, voice_id)
        except CoachClientError as exc:
            logger.error("TTS failed: %s", exc)
            return error_response(str(exc) or "TTS failed", 500)
        except Exception:
            logger.exception("TTS failed")
            return error_response("TTS failed", 500)

        return Response(content=audio, media_type="audio/mpeg")

    return app
