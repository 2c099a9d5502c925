"""
Pytest fixtures for access-resolution tests.
"""

import os

# Point the application engine at SQLite before src.database is imported;
# integration tests override the session dependency anyway.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./.pytest_access.db")

from dataclasses import dataclass, field
from typing import AsyncGenerator, Dict, List, Optional, Set, Tuple

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.database import create_engine_for
from src.kernel.identity.context import UserContext
from src.kernel.models import (
    Asset,
    Base,
    Episode,
    Project,
    ProjectPermission,
    ProjectRole,
    Sequence,
    Shot,
    User,
    UserRole,
    Version,
)
from src.kernel.permissions.permission_service import AccessEvaluator
from src.kernel.permissions.store import (
    AssetLink,
    EpisodeLink,
    PermissionRecord,
    SequenceLink,
    ShotLink,
    VersionRef,
)


@dataclass
class InMemoryAccessStore:
    """
    AccessStore over plain dicts that records every lookup it serves.

    `calls` holds (method_name, args) tuples in call order so tests can
    assert which hops were, and were not, attempted.
    """

    project_ids: Set[int] = field(default_factory=set)
    permissions: Dict[Tuple[int, int], ProjectRole] = field(default_factory=dict)
    episodes: Dict[int, Optional[int]] = field(default_factory=dict)
    sequences: Dict[int, Optional[int]] = field(default_factory=dict)
    shots: Dict[int, Optional[int]] = field(default_factory=dict)
    assets: Dict[int, Optional[int]] = field(default_factory=dict)
    versions: Dict[int, VersionRef] = field(default_factory=dict)
    calls: List[Tuple[str, tuple]] = field(default_factory=list)

    def called(self, method: str) -> List[tuple]:
        return [args for name, args in self.calls if name == method]

    async def list_all_project_ids(self) -> Set[int]:
        self.calls.append(("list_all_project_ids", ()))
        return set(self.project_ids)

    async def list_permissions_for_user(self, user_id: int) -> List[PermissionRecord]:
        self.calls.append(("list_permissions_for_user", (user_id,)))
        return [
            PermissionRecord(project_id=project_id, role=role)
            for (uid, project_id), role in self.permissions.items()
            if uid == user_id
        ]

    async def find_permission(self, user_id: int, project_id: int) -> Optional[PermissionRecord]:
        self.calls.append(("find_permission", (user_id, project_id)))
        role = self.permissions.get((user_id, project_id))
        if role is None:
            return None
        return PermissionRecord(project_id=project_id, role=role)

    async def find_episode(self, episode_id: int) -> Optional[EpisodeLink]:
        self.calls.append(("find_episode", (episode_id,)))
        if episode_id not in self.episodes:
            return None
        return EpisodeLink(id=episode_id, project_id=self.episodes[episode_id])

    async def find_sequence(self, sequence_id: int) -> Optional[SequenceLink]:
        self.calls.append(("find_sequence", (sequence_id,)))
        if sequence_id not in self.sequences:
            return None
        return SequenceLink(id=sequence_id, episode_id=self.sequences[sequence_id])

    async def find_shot(self, shot_id: int) -> Optional[ShotLink]:
        self.calls.append(("find_shot", (shot_id,)))
        if shot_id not in self.shots:
            return None
        return ShotLink(id=shot_id, sequence_id=self.shots[shot_id])

    async def find_asset(self, asset_id: int) -> Optional[AssetLink]:
        self.calls.append(("find_asset", (asset_id,)))
        if asset_id not in self.assets:
            return None
        return AssetLink(id=asset_id, project_id=self.assets[asset_id])

    async def find_version(self, version_id: int) -> Optional[VersionRef]:
        self.calls.append(("find_version", (version_id,)))
        return self.versions.get(version_id)


# Users

ADMIN_ID = 1
CONTRIBUTOR_ID = 2
OUTSIDER_ID = 3


@pytest.fixture
def admin_user() -> UserContext:
    return UserContext(user_id=ADMIN_ID, global_role=UserRole.ADMIN)


@pytest.fixture
def contributor_user() -> UserContext:
    """Director holding CONTRIBUTOR on project 30 and VIEWER on project 7."""
    return UserContext(user_id=CONTRIBUTOR_ID, global_role=UserRole.DIRECTOR)


@pytest.fixture
def outsider_user() -> UserContext:
    """Artist without any project permission."""
    return UserContext(user_id=OUTSIDER_ID, global_role="artist")


@pytest.fixture
def store() -> InMemoryAccessStore:
    """
    Shot 1 -> Sequence 10 -> Episode 20 -> Project 30, plus broken links:
    sequence 11 has no episode, shot 2 has no sequence, episode 21 has no
    project, asset 41 has no project.
    """
    return InMemoryAccessStore(
        project_ids={3, 7, 30},
        permissions={
            (CONTRIBUTOR_ID, 30): ProjectRole.CONTRIBUTOR,
            (CONTRIBUTOR_ID, 7): ProjectRole.VIEWER,
        },
        episodes={20: 30, 21: None},
        sequences={10: 20, 11: None},
        shots={1: 10, 2: None},
        assets={40: 30, 41: None},
        versions={
            100: VersionRef(entity_id=40, entity_type="asset"),
            101: VersionRef(entity_id=10, entity_type="Sequence"),
            102: VersionRef(entity_id=None, entity_type="asset"),
        },
    )


@pytest.fixture
def evaluator(store: InMemoryAccessStore) -> AccessEvaluator:
    return AccessEvaluator(store)


# SQL-backed fixtures (SQLite via aiosqlite)

@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path):
    """Create a throwaway SQLite database with all tables."""
    engine = create_engine_for(f"sqlite+aiosqlite:///{tmp_path / 'access.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_maker(db_engine) -> async_sessionmaker:
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded_db(session_maker) -> None:
    """
    Same layout as the in-memory `store` fixture, persisted. Rows are flushed
    parent-first so foreign keys hold.
    """
    async with session_maker() as session:
        session.add_all([
            User(id=ADMIN_ID, email="admin@example.com", full_name="Admin", role=UserRole.ADMIN),
            User(id=CONTRIBUTOR_ID, email="director@example.com", full_name="Director", role=UserRole.DIRECTOR),
            User(id=OUTSIDER_ID, email="artist@example.com", full_name="Artist", role=UserRole.ARTIST),
            User(id=4, email="former@example.com", full_name="Former", role=UserRole.MEMBER, is_active=False),
        ])
        session.add_all([
            Project(id=3, code="PRJ_003", name="Pilot"),
            Project(id=7, code="PRJ_007", name="Feature"),
            Project(id=30, code="PRJ_030", name="Series"),
        ])
        await session.flush()

        session.add_all([
            ProjectPermission(user_id=CONTRIBUTOR_ID, project_id=30, role=ProjectRole.CONTRIBUTOR),
            ProjectPermission(user_id=CONTRIBUTOR_ID, project_id=7, role=ProjectRole.VIEWER),
            Episode(id=20, code="EP_020", name="Episode 20", project_id=30),
            Episode(id=21, code="EP_021", name="Orphan episode", project_id=None),
            Asset(id=40, code="AST_040", name="Hero prop", project_id=30),
            Asset(id=41, code="AST_041", name="Loose prop", project_id=None),
        ])
        await session.flush()

        session.add_all([
            Sequence(id=10, code="SEQ_010", name="Sequence 10", episode_id=20),
            Sequence(id=11, code="SEQ_011", name="Orphan sequence", episode_id=None),
        ])
        await session.flush()

        session.add_all([
            Shot(id=1, code="SH_001", name="Shot 1", sequence_id=10),
            Shot(id=2, code="SH_002", name="Orphan shot", sequence_id=None),
            Version(id=100, code="V100", name="Prop v1", entity_id=40, entity_type="asset"),
            Version(id=101, code="V101", name="Seq v1", entity_id=10, entity_type="Sequence"),
            Version(id=102, code="V102", name="Detached", entity_id=None, entity_type="asset"),
            Version(id=103, code="V103", name="Shot v1", entity_id=1, entity_type="shot"),
        ])
        await session.commit()
