#!/usr/bin/env python3
"""Helper script to check and create the .env file for Supabase configuration."""

from pathlib import Path
import sys

TEMPLATE = """# Supabase Configuration (required unless HAULBOOK_STORAGE_BACKEND=memory)
# Get these from: https://supabase.com/dashboard → Your Project → Settings → API
HAULBOOK_SUPABASE_URL=https://your-project-id.supabase.co
HAULBOOK_SUPABASE_KEY=your-service-role-key-here

# API Configuration
HAULBOOK_API_PREFIX=/api
HAULBOOK_LOG_LEVEL=INFO
# HAULBOOK_STORAGE_BACKEND=memory
# HAULBOOK_FRONTEND_ALLOWED_ORIGINS - JSON array or comma-separated list

# Customer code numbering
HAULBOOK_CUSTOMER_CODE_PREFIX=C
HAULBOOK_CUSTOMER_CODE_DIGITS=6
"""

SECRET_KEYS = ("HAULBOOK_SUPABASE_KEY", "SUPABASE_SERVICE_ROLE_KEY")


def mask(value: str) -> str:
    if len(value) > 20:
        return value[:20] + "..." + value[-10:]
    return value


def print_env_file(env_file: Path) -> None:
    print("Current contents:")
    print("-" * 60)
    for line in env_file.read_text(encoding="utf-8").splitlines():
        name, sep, value = line.partition("=")
        if sep and name.strip() in SECRET_KEYS:
            print(f"{name}={mask(value.strip())}")
        else:
            print(line)
    print("-" * 60)
    print()


def main():
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("Haulbook Environment Checker")
    print("=" * 60)
    print()

    if not env_file.exists():
        print(f"❌ .env file NOT found at: {env_file}")
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"✅ Created template .env file at: {env_file}")
        print("⚠️  Please edit .env and add your Supabase credentials!")
        return

    print(f"✅ Found .env file at: {env_file}")
    print()
    print_env_file(env_file)

    print("Testing config loading...")
    print()
    sys.path.insert(0, str(project_root / "src"))
    from haulbook.config import Settings

    settings = Settings(_env_file=env_file)
    print(f"Storage backend: {settings.storage_backend}")
    if settings.supabase_url:
        print(f"✅ Supabase URL: {settings.supabase_url[:30]}...")
    else:
        print("❌ Supabase URL is not set")
    if settings.supabase_key:
        print(f"✅ Supabase key: {mask(settings.supabase_key)}")
    else:
        print("❌ Supabase key is not set")
    print()

    if settings.storage_backend == "memory" or settings.supabase_configured:
        print("✅ SUCCESS: configuration is usable")
    else:
        print("❌ ERROR: Supabase is NOT configured")
        print("1. Make sure .env exists in the project root")
        print("2. Use the HAULBOOK_ prefix (or SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY)")
        print("3. Restart the backend after editing .env")


if __name__ == "__main__":
    main()
