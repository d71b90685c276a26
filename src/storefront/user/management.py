"""User management — commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.store.store import Store
from storefront.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class CreateUser:
    store_id: Identifier(required=True)
    email: String(required=True, max_length=254)
    name: String(max_length=150)
    is_admin: Boolean(default=False)


@storefront.command(part_of="User")
class UpdateUser:
    user_id: Identifier(required=True)
    email: String(max_length=254)
    name: String(max_length=150)


@storefront.command(part_of="User")
class DeleteUser:
    user_id: Identifier(required=True)


def _ensure_email_is_free(repo, store_id, email, user_id=None):
    owner = repo.find_by_email(store_id, email)
    if owner is not None and str(owner.id) != str(user_id):
        raise ValidationError({"email": ["User already exists with this email"]})


@storefront.command_handler(part_of=User)
class ManageUserHandler:
    @handle(CreateUser)
    def create_user(self, command):
        current_domain.repository_for(Store).get(command.store_id)

        repo = current_domain.repository_for(User)
        _ensure_email_is_free(repo, command.store_id, command.email)

        user = User.register(
            store_id=command.store_id,
            email=command.email,
            name=command.name,
            is_admin=command.is_admin,
        )
        repo.add(user)
        return str(user.id)

    @handle(UpdateUser)
    def update_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        if command.email:
            _ensure_email_is_free(repo, user.store_id, command.email, user_id=user.id)

        user.update_details(name=command.name, email=command.email)
        repo.add(user)

    @handle(DeleteUser)
    def delete_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        repo._dao.delete(user)
        logger.info("user_deleted", user_id=str(user.id), store_id=str(user.store_id))
