"""Identity switching."""

import logging
from pathlib import Path

from ..errors import IdentityNotFoundError
from ..identities.models import Store
from .git import GitConfig
from .plan import SwitchPlan, build_plan

logger = logging.getLogger(__name__)


def plan_switch(
    store: Store,
    target_id: str,
    home: Path | None = None,
    ssh_executable: str = "ssh",
) -> SwitchPlan:
    """Build the plan for switching to an identity without running it.

    Raises:
        IdentityNotFoundError: If the target id is not in the store
    """
    identity = store.resolve(target_id)
    if identity is None:
        raise IdentityNotFoundError(target_id, list(store.identities))
    return build_plan(target_id, identity, home=home, ssh_executable=ssh_executable)


def switch(
    store: Store,
    target_id: str,
    git: GitConfig,
    home: Path | None = None,
    ssh_executable: str = "ssh",
) -> tuple[Store, SwitchPlan]:
    """Make an identity current and write it into git's configuration.

    Directives run in order, each as its own git invocation. The first
    failure aborts the switch; directives already applied are not rolled
    back.

    Args:
        store: Store holding the target identity
        target_id: Id of the identity to activate
        git: Runner that applies the directives
        home: Home directory for ``~`` expansion in the SSH key path
        ssh_executable: SSH client named in core.sshCommand

    Returns:
        Tuple of (store with current set to target_id, executed plan)

    Raises:
        IdentityNotFoundError: If the target id is not in the store
        GitConfigError: If a git invocation fails
    """
    plan = plan_switch(store, target_id, home=home, ssh_executable=ssh_executable)

    for directive in plan.directives:
        git.apply(directive)

    logger.info("Switched to %s (%d directives)", target_id, len(plan.directives))

    updated = store.model_copy(deep=True)
    updated.current = target_id
    return updated, plan
