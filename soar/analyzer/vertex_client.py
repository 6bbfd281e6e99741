import requests
import structlog

from soar.analyzer.anthropic_client import first_text_block
from soar.analyzer.base import LLMClient
from soar.schema.errors import AnalysisError, ConfigurationError

logger = structlog.get_logger()

VERTEX_ANTHROPIC_VERSION = "vertex-2023-10-16"
CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"


class VertexClient(LLMClient):
    """
    Claude on Google Cloud Vertex AI.

    Same Messages payload as the direct API, posted to the publisher
    model's rawPredict endpoint with a Google OAuth bearer token.
    Credentials come from Application Default Credentials unless given.
    """

    def __init__(
        self,
        project_id: str,
        model: str,
        region: str = "us-east5",
        max_tokens: int = 8192,
        timeout: float = 300,
        credentials=None,
    ):
        if not project_id:
            raise ConfigurationError(
                "GOOGLE_CLOUD_PROJECT",
                "Vertex AI requires a project id: export GOOGLE_CLOUD_PROJECT=your-project",
            )
        self.project_id = project_id
        self.model = model
        self.region = region
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.credentials = credentials

    @property
    def endpoint(self) -> str:
        return (
            f"https://{self.region}-aiplatform.googleapis.com/v1/projects/{self.project_id}"
            f"/locations/{self.region}/publishers/anthropic/models/{self.model}:rawPredict"
        )

    def _access_token(self) -> str:
        # google-auth is only needed for this provider
        import google.auth
        from google.auth.exceptions import DefaultCredentialsError, RefreshError
        from google.auth.transport.requests import Request

        if self.credentials is None:
            try:
                self.credentials, _ = google.auth.default(scopes=[CLOUD_PLATFORM_SCOPE])
            except DefaultCredentialsError as e:
                raise ConfigurationError(
                    "GOOGLE_APPLICATION_CREDENTIALS",
                    "run `gcloud auth application-default login`",
                ) from e
        if not self.credentials.valid:
            try:
                self.credentials.refresh(Request())
            except RefreshError as e:
                raise AnalysisError(f"Could not refresh Google credentials: {e}") from e
        return self.credentials.token

    def generate(self, messages, system: str = "") -> str:
        payload = {
            "anthropic_version": VERTEX_ANTHROPIC_VERSION,
            "max_tokens": self.max_tokens,
            "messages": messages,
        }
        if system:
            payload["system"] = system

        logger.info("vertex_request", model=self.model, region=self.region)
        response = requests.post(
            self.endpoint,
            json=payload,
            headers={
                "Authorization": f"Bearer {self._access_token()}",
                "content-type": "application/json",
            },
            timeout=self.timeout,
        )
        response.raise_for_status()

        return first_text_block(response.json())
