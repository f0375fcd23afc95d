# core/supabase_client.py

from typing import Optional

from supabase import create_client, Client
from core.config import settings
from core.logging_config import logger


# ============================================================
# Supabase Client Factory
# ============================================================

def get_supabase_client() -> Optional[Client]:
    """
    Creates a Supabase client using the SERVICE ROLE KEY.
    Used for:
        - auth.get_user (token → user)
        - auth.sign_in_with_password / auth.sign_up
    Returns None when Supabase is not configured.
    """
    supabase_url = settings.SUPABASE_URL
    supabase_key = settings.SUPABASE_SERVICE_ROLE_KEY

    if not supabase_url or not supabase_key:
        logger.error("Missing Supabase credentials")
        logger.error(f"   URL: {supabase_url}")
        logger.error(f"   SERVICE ROLE KEY: {'SET' if supabase_key else 'MISSING'}")
        return None

    try:
        return create_client(supabase_url, supabase_key)
    except Exception as e:
        logger.error(f"Supabase Init Error: {e}", exc_info=True)
        return None
