"""AI theme generation: prompt in, fully populated ThemeConfig out."""

import json
import logging
import os

import httpx

from cytheme.client import DEFAULT_BASE_URL, DEFAULT_MODEL, BlockedPromptError, GeminiClient
from cytheme.model import ThemeConfig, merge_over_defaults
from cytheme.schema import RESPONSE_SCHEMA, build_prompt

log = logging.getLogger(__name__)

API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY")

LOADING_MESSAGES = (
    "Consulting the design muses...",
    "Weaving CSS magic...",
    "Scripting dynamic experiences...",
    "Painting with pixels...",
    "Aligning style grids...",
    "Compiling creativity...",
    "Brewing a fresh theme...",
)

INVALID_STRUCTURE = "The AI returned an invalid theme structure. Please try again."


class ThemeGenerationError(Exception):
    """Base for every failure of a generation request. str() is user-facing."""


class EmptyPromptError(ThemeGenerationError):
    def __init__(self) -> None:
        super().__init__("Please enter a description for your theme.")


class MissingCredentialError(ThemeGenerationError):
    def __init__(self, names: tuple[str, ...]) -> None:
        super().__init__(f"{' or '.join(names)} environment variable not found.")
        self.names = names


class ServiceError(ThemeGenerationError):
    """Transport failure, non-2xx status, refusal or an empty answer."""


class InvalidResponseError(ThemeGenerationError):
    """The answer was not a JSON object."""

    def __init__(self, raw: str) -> None:
        super().__init__(INVALID_STRUCTURE)
        self.raw = raw


def find_api_key(names: tuple[str, ...] = API_KEY_ENV_VARS) -> str | None:
    """First non-empty value among the environment variables ``names``."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


def parse_theme_json(text: str) -> ThemeConfig:
    """Decode a model answer and merge it over the defaults."""
    try:
        data = json.loads(text.strip())
    except json.JSONDecodeError as e:
        log.debug("Unparseable AI response (%s): %s", e, text)
        raise InvalidResponseError(text) from e
    if not isinstance(data, dict):
        log.debug("AI response is %s, not an object", type(data).__name__)
        raise InvalidResponseError(text)
    return merge_over_defaults(data)


class ThemeGenerator:
    """Turns a free-text description into a ThemeConfig with one structured-output call."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        api_key_env: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.model = model
        self.base_url = base_url
        self.key_names = (api_key_env,) if api_key_env else API_KEY_ENV_VARS
        self._transport = transport

    async def generate(self, prompt: str) -> ThemeConfig:
        """Generate a new theme. Unspecified fields come from the defaults, never from
        any earlier theme. Raises a ThemeGenerationError subclass on failure."""
        if not prompt.strip():
            raise EmptyPromptError()

        api_key = find_api_key(self.key_names)
        if not api_key:
            raise MissingCredentialError(self.key_names)

        client = GeminiClient(
            api_key=api_key, base_url=self.base_url, model=self.model, transport=self._transport
        )
        try:
            completion = await client.generate_json(build_prompt(prompt), RESPONSE_SCHEMA)
        except httpx.HTTPStatusError as e:
            raise ServiceError(
                f"An error occurred: {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise ServiceError(f"An error occurred: {e}") from e
        except BlockedPromptError as e:
            raise ServiceError(f"An error occurred: the prompt was blocked ({e.reason})") from e
        except ValueError as e:
            # resp.json() on a non-JSON body lands here too
            raise ServiceError(f"An error occurred: {e}") from e
        finally:
            await client.close()

        log.info("Received %d characters (finish reason %s)", len(completion.text), completion.finish_reason)
        return parse_theme_json(completion.text)
