"""Unit tests for the project role order."""

import pytest

from src.kernel.models.project import ProjectRole
from src.kernel.permissions.roles import PROJECT_ROLE_HIERARCHY, rank, satisfies


class TestRoleOrder:
    """Tests for rank() and satisfies()."""
    
    def test_every_role_has_explicit_rank(self):
        """Adding a ProjectRole without a rank must be caught."""
        assert set(PROJECT_ROLE_HIERARCHY) == set(ProjectRole)
    
    def test_ranks_strictly_increase(self):
        assert rank(ProjectRole.VIEWER) < rank(ProjectRole.CONTRIBUTOR) < rank(ProjectRole.OWNER)
    
    @pytest.mark.parametrize("role", list(ProjectRole))
    def test_every_role_satisfies_viewer(self, role):
        assert satisfies(role, ProjectRole.VIEWER) is True
    
    @pytest.mark.parametrize("role", list(ProjectRole))
    def test_role_satisfies_itself(self, role):
        assert satisfies(role, role) is True
    
    @pytest.mark.parametrize(
        "have,need",
        [
            (ProjectRole.VIEWER, ProjectRole.CONTRIBUTOR),
            (ProjectRole.VIEWER, ProjectRole.OWNER),
            (ProjectRole.CONTRIBUTOR, ProjectRole.OWNER),
        ],
    )
    def test_weaker_role_does_not_satisfy_stronger(self, have, need):
        assert satisfies(have, need) is False
    
    def test_owner_satisfies_contributor(self):
        assert satisfies(ProjectRole.OWNER, ProjectRole.CONTRIBUTOR) is True
    
    def test_stored_labels_are_accepted(self):
        """Roles read back from storage arrive as plain strings."""
        assert satisfies("owner", "contributor") is True
        assert rank("viewer") == rank(ProjectRole.VIEWER)
    
    def test_unknown_label_is_rejected(self):
        with pytest.raises(ValueError):
            rank("superuser")
