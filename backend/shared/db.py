from supabase import Client, ClientOptions, create_client
from dotenv import load_dotenv
import os

load_dotenv()

JOBS_TABLE = "job_analysis"


def get_supabase_client(
    url: str | None = None,
    key: str | None = None,
    timeout: float | None = None,
) -> Client:
    """Get initialized Supabase client.

    Falls back to SUPABASE_URL / SUPABASE_SERVICE_KEY when url or key are not
    passed. ``timeout`` bounds every PostgREST request, in seconds.
    """
    url = url or os.getenv("SUPABASE_URL")
    key = key or os.getenv("SUPABASE_SERVICE_KEY")

    if not url or not key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set")

    if timeout is None:
        return create_client(url, key)

    return create_client(url, key, options=ClientOptions(postgrest_client_timeout=timeout))
