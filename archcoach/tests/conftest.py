"""
Pytest configuration and fixtures for backend tests.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
import sys
import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from archcoach.database import Base
from archcoach.models.project import ProjectRecord  # noqa: F401
from archcoach.schemas.chat import ChatTurn
from archcoach.services.component_catalog import EvaluationConfig
from archcoach.services.model_gateway import ModelGateway


@pytest.fixture
def mock_gateway():
    """A model gateway whose generate() is an AsyncMock."""
    gateway = MagicMock(spec=ModelGateway)
    gateway.generate = AsyncMock(return_value="はい、予算はなるべく抑えたいですね。")
    return gateway


@pytest.fixture
def evaluation_config():
    """Small evaluation configuration with a two-component whitelist."""
    return EvaluationConfig.build(["Load Balancer", "API Server"])


@pytest.fixture
def custom_transcript():
    """Custom-scenario transcript opened with a hidden briefing."""
    return [
        ChatTurn(role="system", content="Role: System Client\nHidden_Context: budget is tiny"),
        ChatTurn(role="assistant", content="ご依頼ありがとうございます。"),
        ChatTurn(role="user", content="想定ユーザー数は？"),
    ]


@pytest.fixture
def design_payload():
    """Evaluate request body for a custom scenario with tampered requirements."""
    return {
        "scenario": {
            "id": "custom",
            "title": "フリマアプリ",
            "isCustom": True,
            "difficulty": "small",
            "requirements": {"users": "1B", "traffic": "none", "budget": "infinite", "availability": "none"},
        },
        "nodes": [
            {"id": "n1", "type": "Load Balancer", "label": "LB", "position": {"x": 0, "y": 0}},
            {"id": "n2", "type": "API Server", "label": "API", "position": {"x": 100, "y": 0}},
        ],
        "edges": [{"source": "n1", "target": "n2"}],
    }


@pytest.fixture
def db_session():
    """In-memory SQLite session with the schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture(autouse=True)
def disable_rate_limits():
    """Rate limiting state is process-wide; keep it out of tests."""
    from archcoach.middleware.rate_limiter import limiter
    previous = limiter.enabled
    limiter.enabled = False
    yield
    limiter.enabled = previous
