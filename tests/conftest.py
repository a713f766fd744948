"""
Shared fixtures: a small electoral hierarchy with fixed ids, the operational
roles and a user factory.

    Section 1
    ├── Locality 7
    │   ├── Circuit 3 ── School 9 ── Tables 21, 22
    │   └── Circuit 4            (no schools)
    └── Locality 8
        └── Circuit 5 ── School 10 ── Table 23
                     └── School 11 ── Table 99
    Locality 12 (no section)
        └── Circuit 6 ── School 13 ── Table 31

    Citizens: 501 → 21, 502 → 22, 503 → 99, 504 → no table
"""

import itertools
from types import SimpleNamespace

import pytest

from access.principal import GrantRef, Principal
from access.services import grant_access
from base.models import Role, User
from territory.models import Circuit, Citizen, Locality, School, Section, Table


ROLE_NAMES = (
    "admin",
    "jefe_campana",
    "responsable_localidad",
    "fiscal_general",
    "fiscal_mesa",
)


@pytest.fixture
def tree(db):
    section = Section.objects.create(pk=1, number=1, name="Sección Primera", slug="seccion-1")

    loc7 = Locality.objects.create(pk=7, name="San Fernando", section=section)
    loc8 = Locality.objects.create(pk=8, name="Victoria", section=section)
    loc12 = Locality.objects.create(pk=12, name="Islas", section=None)

    c3 = Circuit.objects.create(pk=3, name="Circuito 3", locality=loc7)
    c4 = Circuit.objects.create(pk=4, name="Circuito 4", locality=loc7)
    c5 = Circuit.objects.create(pk=5, name="Circuito 5", locality=loc8)
    c6 = Circuit.objects.create(pk=6, name="Circuito 6", locality=loc12)

    s9 = School.objects.create(pk=9, name="Escuela N° 9", circuit=c3)
    s10 = School.objects.create(pk=10, name="Escuela N° 10", circuit=c5)
    s11 = School.objects.create(pk=11, name="Escuela N° 11", circuit=c5)
    s13 = School.objects.create(pk=13, name="Escuela N° 13", circuit=c6)

    t21 = Table.objects.create(pk=21, number=1, school=s9)
    t22 = Table.objects.create(pk=22, number=2, school=s9)
    t23 = Table.objects.create(pk=23, number=3, school=s10)
    t99 = Table.objects.create(pk=99, number=4, school=s11)
    t31 = Table.objects.create(pk=31, number=5, school=s13)

    c1 = Citizen.objects.create(pk=501, first_name="Ana", last_name="Alvarez", dni=20000001, table=t21)
    c2 = Citizen.objects.create(pk=502, first_name="Bruno", last_name="Benitez", dni=20000002, table=t22)
    c3_ = Citizen.objects.create(pk=503, first_name="Carla", last_name="Castro", dni=20000003, table=t99)
    c4_ = Citizen.objects.create(pk=504, first_name="Diego", last_name="Diaz", dni=20000004, table=None)

    return SimpleNamespace(
        section=section,
        loc7=loc7, loc8=loc8, loc12=loc12,
        c3=c3, c4=c4, c5=c5, c6=c6,
        s9=s9, s10=s10, s11=s11, s13=s13,
        t21=t21, t22=t22, t23=t23, t99=t99, t31=t31,
        cit1=c1, cit2=c2, cit3=c3_, cit4=c4_,
    )


@pytest.fixture
def roles(db):
    return {
        name: Role.objects.create(name=name, display_name=name.replace("_", " ").title(), is_system=True)
        for name in ROLE_NAMES
    }


@pytest.fixture
def make_user(roles):
    counter = itertools.count(1)

    def _make(role_name="fiscal_mesa", email=None, **extra):
        email = email or f"user{next(counter)}@fieldops.test"
        return User.objects.create_user(email=email, password="secret", role=roles[role_name], **extra)

    return _make


@pytest.fixture
def make_grant():
    def _grant(user, entity, status="active"):
        return grant_access(user, entity, status=status)

    return _grant


@pytest.fixture
def principal():
    """Principal factory from (level, id[, status]) tuples."""

    def _principal(*grants, role_name="responsable_localidad"):
        return Principal(role_name=role_name, grants=tuple(GrantRef(*g) for g in grants))

    return _principal
