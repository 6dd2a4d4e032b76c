"""Supabase client for the Python backend."""

import logging

from supabase import Client, ClientOptions, create_client

from ..config import Settings
from ..middleware.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client:
    """Create the Supabase client used for the lifetime of the process.

    Raises:
        ConfigurationError: when the URL or the service role key is missing.
        Note: This does not test the connection - actual queries may fail with network errors.
    """
    if not settings.supabase_configured:
        raise ConfigurationError(
            "Supabase env missing: set HAULBOOK_SUPABASE_URL and HAULBOOK_SUPABASE_KEY "
            "(or SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY)"
        )

    client = create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
    logger.info(f"Supabase client created for {settings.supabase_url}")
    return client


# Example usage patterns:
#
# client = create_supabase_client(settings)
#
# # Select with filters
# result = client.table('shipments') \
#     .select('*, customers(name)') \
#     .gte('date', '2024-05-01') \
#     .eq('status', 'unclosed') \
#     .execute()
#
# # Bulk update returning the touched rows
# result = client.table('shipments') \
#     .update({'status': 'closed'}) \
#     .eq('customer_id', 1) \
#     .eq('status', 'unclosed') \
#     .execute()
