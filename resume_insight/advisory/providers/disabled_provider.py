class DisabledAdvisoryClient:
    """Stand-in used when the advisory service is not configured; never does I/O."""

    def __init__(self, model: str = ""):
        self._model = model

    @property
    def enabled(self) -> bool:
        return False

    @property
    def model(self) -> str:
        return self._model

    def generate(self, prompt: str, system_role: str) -> str | None:
        return None
