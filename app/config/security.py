# app/config/security.py
# Security configuration for tokens, passwords and CORS

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


class SecurityConfig:
    """Security configuration for the application"""

    # Bearer token settings
    JWT = {
        'secret_key': os.getenv('SECRET_KEY', ''),
        'algorithm': os.getenv('ALGORITHM', 'HS256'),
        'access_token_expire_minutes': int(os.getenv('ACCESS_TOKEN_EXPIRE_MINUTES', 60)),
    }

    # Password policy and hashing
    PASSWORD = {
        'min_length': 8,
        'max_length': 100,
        # 1 uppercase, 1 lowercase and 1 digit or special character
        'pattern': r'^(?=.*[A-Z])(?=.*[a-z])(?=.*(\d|\W)).*$',
        'bcrypt_rounds': int(os.getenv('BCRYPT_ROUNDS', 12)),
    }

    # CORS configuration
    CORS = {
        'allow_origins': _split_csv(os.getenv(
            'CORS_ORIGINS',
            'http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000'
        )),
    }

    # Bootstrap manager created by create_tables.py
    BOOTSTRAP = {
        'admin_name': os.getenv('DEFAULT_ADMIN_NAME', 'System Administrator'),
        'admin_email': os.getenv('DEFAULT_ADMIN_EMAIL', 'admin@example.com'),
        'admin_password': os.getenv('DEFAULT_ADMIN_PASSWORD', 'Admin@123'),
        'admin_department': os.getenv('DEFAULT_ADMIN_DEPARTMENT', 'Engineering'),
        'departments': [
            'Engineering', 'Marketing', 'Finance', 'HR',
            'Product', 'Sales', 'Customer Support', 'Legal'
        ],
    }

    @classmethod
    def get_secret_key(cls) -> str:
        """Get the JWT signing secret, failing loudly when it is not configured"""
        secret_key = cls.JWT['secret_key']
        if not secret_key:
            raise RuntimeError("SECRET_KEY is not configured")
        return secret_key
