from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from supabase import Client, create_client


@dataclass
class SupabaseConfig:
    url: str
    key: str

    @property
    def configured(self) -> bool:
        return bool(self.url and self.key)


class DatabaseConnection:
    """Singleton-like Supabase client factory.

    Note: The client talks HTTP to the hosted database and storage API, so one
    lazily created client is shared by all repositories.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: SupabaseConfig):
        self._config = config
        self._client: Optional[Client] = None

    @classmethod
    def get_instance(cls, config: SupabaseConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> SupabaseConfig:
        return self._config

    def client(self) -> Client:
        if self._client is None:
            if not self._config.configured:
                raise RuntimeError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
            self._client = create_client(self._config.url, self._config.key)
        return self._client

    def table(self, name: str):
        return self.client().table(name)
