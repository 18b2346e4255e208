"""
시드 데이터 리비전에서 사용하는 헬퍼입니다.
모든 삽입은 유일 키(name / username)로 먼저 존재 여부를 확인하므로,
같은 리비전이 다시 실행되어도 중복 행이 생기지 않습니다.

리비전은 모델 클래스 대신 여기 정의된 경량 테이블을 사용합니다.
(모델이 바뀌어도 과거 리비전의 동작은 바뀌지 않아야 하기 때문입니다.)
"""
from typing import Iterable, Sequence, Tuple

import sqlalchemy as sa
from sqlalchemy.engine import Connection
from uuid6 import uuid7

from identity.config import get_settings
from identity.database.database import utcnow
from identity.domain import SYSTEM_ACTOR
from identity.logger import get_logger

log = get_logger(__name__)


def _audit_columns():
    return (
        sa.column("created_at", sa.DateTime(timezone=True)),
        sa.column("updated_at", sa.DateTime(timezone=True)),
        sa.column("created_by", sa.String),
        sa.column("updated_by", sa.String),
    )


def _user_columns(id_type):
    return (
        sa.column("id", id_type),
        sa.column("username", sa.String),
        sa.column("email", sa.String),
        sa.column("password_hash", sa.String),
        sa.column("first_name", sa.String),
        sa.column("last_name", sa.String),
        sa.column("enabled", sa.Boolean),
        *_audit_columns(),
    )


roles = sa.table(
    "roles",
    sa.column("id", sa.Uuid),
    sa.column("name", sa.String),
    sa.column("description", sa.String),
    *_audit_columns(),
)
users = sa.table("users", *_user_columns(sa.Uuid))
user_roles = sa.table(
    "user_roles",
    sa.column("user_id", sa.Uuid),
    sa.column("role_id", sa.Uuid),
)

sample_roles = sa.table(
    "sample_roles",
    sa.column("id", sa.Integer),
    sa.column("name", sa.String),
    sa.column("description", sa.String),
    *_audit_columns(),
)
sample_users = sa.table("sample_users", *_user_columns(sa.Integer))
sample_user_roles = sa.table(
    "sample_user_roles",
    sa.column("user_id", sa.Integer),
    sa.column("role_id", sa.Integer),
    sa.column("assigned_at", sa.DateTime(timezone=True)),
    sa.column("assigned_by", sa.String),
)


def _new_row(table: sa.TableClause) -> dict:
    """감사 컬럼과, UUID 키 테이블이면 시간 순서 id를 채운 행 값을 만듭니다."""
    now = utcnow()
    row = {"created_at": now, "updated_at": now, "created_by": SYSTEM_ACTOR, "updated_by": SYSTEM_ACTOR}
    if isinstance(table.c.id.type, sa.Uuid):
        row["id"] = uuid7()
    return row


def _first_id(bind: Connection, table: sa.TableClause, column: str, value: str):
    return bind.execute(sa.select(table.c.id).where(table.c[column] == value)).scalar()


def row_exists(bind: Connection, table: sa.TableClause, column: str, value: str) -> bool:
    return _first_id(bind, table, column, value) is not None


def ensure_roles(bind: Connection, table: sa.TableClause, rows: Sequence[Tuple[str, str]]) -> None:
    """(이름, 설명) 목록 중 아직 없는 역할만 삽입합니다."""
    for name, description in rows:
        if row_exists(bind, table, "name", name):
            continue
        bind.execute(sa.insert(table).values(name=name, description=description, **_new_row(table)))


def delete_roles(bind: Connection, table: sa.TableClause, names: Iterable[str]) -> None:
    bind.execute(sa.delete(table).where(table.c.name.in_(list(names))))


def ensure_users(bind: Connection, table: sa.TableClause, rows: Sequence[dict]) -> None:
    """
    사용자 이름 기준으로 아직 없는 사용자만 삽입합니다.
    비밀번호 해시는 설정값(seed_password_hash)을 사용합니다.
    """
    password_hash = get_settings().seed_password_hash
    for user in rows:
        if row_exists(bind, table, "username", user["username"]):
            continue
        bind.execute(sa.insert(table).values(
            password_hash=password_hash,
            enabled=True,
            **_new_row(table),
            **user,
        ))


def ensure_assignments(
    bind: Connection,
    join_table: sa.TableClause,
    user_table: sa.TableClause,
    role_table: sa.TableClause,
    pairs: Sequence[Tuple[str, str]],
) -> None:
    """
    (사용자 이름, 역할 이름) 쌍을 연결합니다.
    사용자나 역할이 없으면 건너뛰고, 이미 연결되어 있으면 다시 넣지 않습니다.
    """
    for username, role_name in pairs:
        user_id = _first_id(bind, user_table, "username", username)
        role_id = _first_id(bind, role_table, "name", role_name)
        if user_id is None or role_id is None:
            log.warning("seed_assignment_skipped", username=username, role=role_name)
            continue
        linked = bind.execute(sa.select(join_table.c.user_id).where(
            join_table.c.user_id == user_id,
            join_table.c.role_id == role_id,
        )).first()
        if linked is not None:
            continue
        values = {"user_id": user_id, "role_id": role_id}
        if "assigned_at" in join_table.c:
            values.update(assigned_at=utcnow(), assigned_by=SYSTEM_ACTOR)
        bind.execute(sa.insert(join_table).values(**values))


def delete_users(
    bind: Connection,
    join_table: sa.TableClause,
    user_table: sa.TableClause,
    usernames: Iterable[str],
) -> None:
    usernames = list(usernames)
    user_ids = sa.select(user_table.c.id).where(user_table.c.username.in_(usernames))
    bind.execute(sa.delete(join_table).where(join_table.c.user_id.in_(user_ids)))
    bind.execute(sa.delete(user_table).where(user_table.c.username.in_(usernames)))


# ===================================================================
#  환경별 기본 데이터 (ADMIN / USER 역할과 admin 계정)
# ===================================================================
BASE_ROLES = [
    ("ADMIN", "Administrator with full access"),
    ("USER", "Standard user"),
]


def ensure_base_data(bind: Connection, admin_email: str) -> None:
    ensure_roles(bind, roles, BASE_ROLES)
    ensure_users(bind, users, [{"username": "admin", "email": admin_email}])
    ensure_assignments(bind, user_roles, users, roles, [("admin", "ADMIN")])


def delete_base_data(bind: Connection) -> None:
    delete_users(bind, user_roles, users, ["admin"])
    delete_roles(bind, roles, [name for name, _ in BASE_ROLES])
