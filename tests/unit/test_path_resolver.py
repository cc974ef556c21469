"""Tests for path resolution and containment."""

import os

import pytest

from neo_file_gateway.core.exceptions import PathResolutionError
from neo_file_gateway.platform.files import resolve_location

from conftest import ADMIN_ID, USER_ID

TRAVERSAL_INPUTS = [
    "..",
    "../",
    "../..",
    "../../etc",
    "../../../../../../etc/passwd",
    "nested/../../",
    "nested/../../demo-admin-uuid",
    "./../demo-admin-uuid/adminfile.txt",
    "a/b/../../../..",
    "..//..//",
    "nested/./../..",
]

CONTAINED_INPUTS = [
    "nested",
    "nested/",
    "./nested",
    "nested/../nested/nested-file.txt",
    "a/b/../c",
    "/etc/passwd",
    "//nested",
    ".",
    "",
]


def _is_inside(anchor, location):
    return location == anchor or anchor in location.parents


class TestResolveLocation:

    @pytest.mark.parametrize("raw", TRAVERSAL_INPUTS)
    def test_traversal_never_escapes(self, storage_root, raw):
        anchor = storage_root.partition(USER_ID)
        try:
            location = resolve_location(storage_root, anchor, raw)
        except PathResolutionError:
            return
        assert _is_inside(anchor, location)

    @pytest.mark.parametrize("raw", TRAVERSAL_INPUTS)
    def test_traversal_is_rejected(self, storage_root, raw):
        with pytest.raises(PathResolutionError):
            resolve_location(storage_root, storage_root.partition(USER_ID), raw)

    @pytest.mark.parametrize("raw", CONTAINED_INPUTS)
    def test_contained_paths_resolve_inside_anchor(self, storage_root, raw):
        anchor = storage_root.partition(USER_ID)
        location = resolve_location(storage_root, anchor, raw)
        assert _is_inside(anchor, location)

    def test_absolute_input_cannot_reanchor(self, storage_root):
        anchor = storage_root.partition(USER_ID)
        assert resolve_location(storage_root, anchor, "/etc/passwd") == anchor / "etc" / "passwd"

    def test_null_byte_rejected(self, storage_root):
        with pytest.raises(PathResolutionError):
            resolve_location(storage_root, storage_root.partition(USER_ID), "userfile.txt\0.png")

    def test_sibling_prefix_is_not_contained(self, storage_root):
        anchor = storage_root.partition(USER_ID)
        with pytest.raises(PathResolutionError):
            resolve_location(storage_root, anchor, f"../{USER_ID}-evil/file.txt")

    def test_anchor_outside_root_rejected(self, storage_root):
        with pytest.raises(PathResolutionError):
            resolve_location(storage_root, storage_root.path.parent, "anything")

    def test_result_is_normalized(self, storage_root):
        anchor = storage_root.partition(USER_ID)
        location = resolve_location(storage_root, anchor, "nested/./x/../nested-file.txt")
        assert str(location) == os.path.join(str(anchor), "nested", "nested-file.txt")


class TestPathResolver:

    def test_user_without_path_gets_partition(self, path_resolver, user_principal, storage_root):
        assert path_resolver.resolve(user_principal) == storage_root.path / USER_ID

    def test_admin_without_path_gets_own_partition(self, path_resolver, admin_principal, storage_root):
        assert path_resolver.resolve(admin_principal) == storage_root.path / ADMIN_ID

    def test_user_path_is_anchored_at_partition(self, path_resolver, user_principal, storage_root):
        assert path_resolver.resolve(user_principal, "nested") == storage_root.path / USER_ID / "nested"

    def test_admin_path_is_anchored_at_root(self, path_resolver, admin_principal, storage_root):
        assert path_resolver.resolve(admin_principal, USER_ID) == storage_root.path / USER_ID

    def test_user_cannot_browse_other_partition(self, path_resolver, user_principal):
        with pytest.raises(PathResolutionError):
            path_resolver.resolve(user_principal, f"../{ADMIN_ID}")

    def test_admin_cannot_leave_root(self, path_resolver, admin_principal):
        with pytest.raises(PathResolutionError):
            path_resolver.resolve(admin_principal, "../../etc")

    def test_tenant_partition(self, path_resolver, user_principal, storage_root):
        assert path_resolver.tenant_partition(user_principal) == storage_root.path / USER_ID


class TestResolveTarget:

    def test_user_dir(self, path_resolver, user_principal, storage_root):
        location = path_resolver.resolve_target(user_principal, "userfile.txt", use_user_dir=True)
        assert location == storage_root.path / USER_ID / "userfile.txt"

    def test_user_dir_rejects_escape(self, path_resolver, user_principal):
        with pytest.raises(PathResolutionError):
            path_resolver.resolve_target(user_principal, f"../{ADMIN_ID}/adminfile.txt", use_user_dir=True)

    def test_relative_path_is_read_against_root(self, path_resolver, user_principal, storage_root):
        location = path_resolver.resolve_target(user_principal, f"{ADMIN_ID}/adminfile.txt")
        assert location == storage_root.path / ADMIN_ID / "adminfile.txt"

    def test_absolute_path_inside_root(self, path_resolver, user_principal, storage_root):
        absolute = str(storage_root.path / USER_ID / "userfile.txt")
        assert path_resolver.resolve_target(user_principal, absolute) == storage_root.path / USER_ID / "userfile.txt"

    def test_absolute_path_outside_root(self, path_resolver, user_principal):
        with pytest.raises(PathResolutionError):
            path_resolver.resolve_target(user_principal, "/etc/passwd")

    def test_absolute_path_escaping_through_dots(self, path_resolver, user_principal, storage_root):
        with pytest.raises(PathResolutionError):
            path_resolver.resolve_target(user_principal, str(storage_root.path) + "/../outside.txt")
