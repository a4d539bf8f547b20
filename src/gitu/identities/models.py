"""Data model for the identity store."""

from pydantic import BaseModel, Field

from ..errors import IdentityNotFoundError


class Identity(BaseModel):
    """A named git authorship profile."""

    display_name: str = Field(..., alias="name", description="Value for git user.name")
    email: str = Field(..., description="Value for git user.email")
    ssh_key_path: str | None = Field(
        default=None,
        alias="ssh",
        description="Private key for core.sshCommand (a leading ~ is the home directory)",
    )

    class Config:
        populate_by_name = True


class IdentityEntry(BaseModel):
    """One row of the identity listing."""

    identity_id: str
    identity: Identity
    is_current: bool = False


class Store(BaseModel):
    """All known identities plus a pointer to the active one.

    Operations return a new store and leave the receiver untouched; the
    caller decides whether to persist the result.
    """

    current: str | None = Field(default=None, description="Id of the active identity")
    identities: dict[str, Identity] = Field(
        default_factory=dict, description="Identities keyed by id, in insertion order"
    )

    def resolve(self, identity_id: str) -> Identity | None:
        """Look up an identity by id."""
        return self.identities.get(identity_id)

    def active(self) -> tuple[str, Identity] | None:
        """Return the current identity, or None if unset or dangling."""
        if not self.current:
            return None
        identity = self.resolve(self.current)
        if identity is None:
            return None
        return self.current, identity

    def add(
        self,
        identity_id: str,
        display_name: str,
        email: str,
        ssh_key_path: str | None = None,
    ) -> "Store":
        """Insert or replace an identity.

        The first identity added to a store without a current pointer
        becomes current.

        Args:
            identity_id: Key for the identity
            display_name: git user.name value
            email: git user.email value
            ssh_key_path: Optional private key path

        Returns:
            Updated store
        """
        store = self.model_copy(deep=True)
        store.identities[identity_id] = Identity(
            display_name=display_name,
            email=email,
            ssh_key_path=ssh_key_path,
        )
        if not store.current:
            store.current = identity_id
        return store

    def remove(self, identity_id: str) -> "Store":
        """Delete an identity.

        Removing the current identity leaves the store without a current
        pointer until the next switch.

        Args:
            identity_id: Key of the identity to delete

        Returns:
            Updated store

        Raises:
            IdentityNotFoundError: If the id is unknown
        """
        if identity_id not in self.identities:
            raise IdentityNotFoundError(identity_id, list(self.identities))

        store = self.model_copy(deep=True)
        del store.identities[identity_id]
        if store.current == identity_id:
            store.current = None
        return store

    def entries(self) -> list[IdentityEntry]:
        """List identities in insertion order, flagging the current one."""
        return [
            IdentityEntry(
                identity_id=identity_id,
                identity=identity,
                is_current=identity_id == self.current,
            )
            for identity_id, identity in self.identities.items()
        ]
