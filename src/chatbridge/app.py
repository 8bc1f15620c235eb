from fastapi import Depends, FastAPI, HTTPException
from typing import List
from pydantic import BaseModel
from dotenv import load_dotenv

# Load env first so settings see API keys
load_dotenv(".env", override=False)

from .clients import AiClient, get_ai_client
from .errors import AiClientError, MissingCredentialsError
from .prompt import Prompt
from .response import AiResponse
from .settings import RuntimeSettings
from .utils.logger import setup_logger

logger = setup_logger()

app = FastAPI(title="chatbridge", version="0.1.0")

# global runtime settings (updated by PATCH /settings)
runtime_settings = RuntimeSettings.from_env()


def get_client() -> AiClient:
    """Build a client for the currently selected provider."""
    try:
        return get_ai_client(
            provider=runtime_settings.provider,
            model=runtime_settings.model,
            temperature=runtime_settings.temperature,
        )
    except (MissingCredentialsError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc))


def _raise_for(exc: Exception):
    if isinstance(exc, MissingCredentialsError):
        raise HTTPException(status_code=400, detail=str(exc))
    raise HTTPException(status_code=502, detail=str(exc))


class PromptRequest(BaseModel):
    prompt: str


class PromptResponse(BaseModel):
    response: str


@app.get("/")
async def root():
    return {"message": "chatbridge is running. Use POST /chat or POST /generate."}


# Blocking HTTP clients run in the threadpool, hence plain ``def`` endpoints
@app.post("/chat", response_model=PromptResponse)
def chat(req: PromptRequest, client: AiClient = Depends(get_client)):
    try:
        logger.debug("[chat] prompt=%s", req.prompt)
        result = client.generate_text(req.prompt)
        logger.debug("[chat] response=%s", result)
        return PromptResponse(response=result)
    except AiClientError as exc:
        logger.error("[chat] provider=%s failed: %s", client.provider, exc)
        _raise_for(exc)


@app.post("/generate", response_model=AiResponse)
def generate(prompt: Prompt, client: AiClient = Depends(get_client)):
    try:
        logger.debug("[generate] provider=%s messages=%d", client.provider, len(prompt.messages))
        return client.generate(prompt)
    except AiClientError as exc:
        logger.error("[generate] provider=%s failed: %s", client.provider, exc)
        _raise_for(exc)


@app.get("/models", response_model=List[str])
def list_models(provider: str):
    try:
        client = get_ai_client(provider=provider)
        models = client.list_models()
    except (AiClientError, ValueError) as exc:
        # Missing credentials or unknown provider; empty list lets the caller warn
        logger.info("[models] provider=%s unavailable: %s", provider, exc)
        return []
    logger.info("[models] provider=%s models_found=%d", provider, len(models))
    return models


@app.get("/settings")
async def get_settings():
    return runtime_settings.to_dict()


class SettingsPatch(BaseModel):
    provider: str | None = None
    model: str | None = None
    temperature: float | None = None


@app.patch("/settings")
async def patch_settings(s: SettingsPatch):
    if s.provider:
        runtime_settings.provider = s.provider.lower()
    if s.model:
        runtime_settings.model = s.model
    if s.temperature is not None:
        runtime_settings.temperature = s.temperature
    logger.info(
        "[settings] provider=%s model=%s temperature=%s",
        runtime_settings.provider,
        runtime_settings.model,
        runtime_settings.temperature,
    )
    return runtime_settings.to_dict()
