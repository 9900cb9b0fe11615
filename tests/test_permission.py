import pytest

from drivecli.permission import DEFAULT_ROLE, DEFAULT_TYPE, PermissionType, Role


@pytest.mark.parametrize("role", list(Role))
def test_role_round_trip(role):
    assert Role.parse(str(role)) is role


@pytest.mark.parametrize("kind", list(PermissionType))
def test_type_round_trip(kind):
    assert PermissionType.parse(str(kind)) is kind


def test_role_file_organizer_spelling():
    assert Role.parse("fileOrganizer") is Role.FILE_ORGANIZER
    assert str(Role.FILE_ORGANIZER) == "fileOrganizer"


def test_invalid_role():
    with pytest.raises(ValueError) as info:
        Role.parse("admin")
    assert str(info.value) == (
        "'admin' is not a valid role, valid roles are: "
        "owner, organizer, fileOrganizer, writer, commenter, reader"
    )


def test_invalid_type():
    with pytest.raises(ValueError) as info:
        PermissionType.parse("everyone")
    assert str(info.value) == (
        "'everyone' is not a valid type, valid types are: user, group, domain, anyone"
    )


def test_defaults():
    assert Role.parse("reader") is DEFAULT_ROLE
    assert PermissionType.parse("anyone") is DEFAULT_TYPE
    assert not DEFAULT_TYPE.requires_email()
    assert DEFAULT_TYPE.supports_file_discovery()


@pytest.mark.parametrize(
    "kind, email, domain, discovery",
    [
        (PermissionType.USER, True, False, False),
        (PermissionType.GROUP, True, False, False),
        (PermissionType.DOMAIN, False, True, True),
        (PermissionType.ANYONE, False, False, True),
    ],
)
def test_type_requirements(kind, email, domain, discovery):
    assert kind.requires_email() is email
    assert kind.requires_domain() is domain
    assert kind.supports_file_discovery() is discovery