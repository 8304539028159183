from libs.result import Result, Return
from src.domain.entities import Role
from . import errors


class AdminGuard:
    """
    Keeps at least one active administrator in the system.

    The caller counts the OTHER active accounts whose role holds the
    administer capability, so the guard never touches storage.
    """

    def can_deactivate_or_demote(self, role: Role, count_of_other_active_admins: int) -> bool:
        return not (role.is_admin and count_of_other_active_admins == 0)

    def check_can_deactivate_or_demote(
        self, role: Role, count_of_other_active_admins: int
    ) -> Result[None]:
        if not self.can_deactivate_or_demote(role, count_of_other_active_admins):
            return Return.err(errors.last_admin_protected())
        return Return.ok(None)
