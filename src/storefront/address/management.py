"""Address book — commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.address.address import ADDRESS_FIELDS, Address
from storefront.domain import storefront


@storefront.command(part_of="Address")
class AddAddress:
    user_id: Identifier(required=True)
    full_name: String(required=True, max_length=150)
    phone: String(required=True, max_length=20)
    line1: String(required=True, max_length=255)
    line2: String(max_length=255)
    city: String(required=True, max_length=100)
    state: String(required=True, max_length=100)
    pincode: String(required=True, max_length=20)
    country: String(required=True, max_length=100)


@storefront.command(part_of="Address")
class UpdateAddress:
    address_id: Identifier(required=True)
    full_name: String(max_length=150)
    phone: String(max_length=20)
    line1: String(max_length=255)
    line2: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    pincode: String(max_length=20)
    country: String(max_length=100)


@storefront.command(part_of="Address")
class DeleteAddress:
    address_id: Identifier(required=True)


@storefront.command_handler(part_of=Address)
class ManageAddressHandler:
    @handle(AddAddress)
    def add_address(self, command):
        details = {name: getattr(command, name) for name in ADDRESS_FIELDS}
        address = Address.add(command.user_id, **details)
        current_domain.repository_for(Address).add(address)
        return str(address.id)

    @handle(UpdateAddress)
    def update_address(self, command):
        repo = current_domain.repository_for(Address)
        address = repo.get(command.address_id)
        address.update(**{name: getattr(command, name) for name in ADDRESS_FIELDS})
        repo.add(address)

    @handle(DeleteAddress)
    def delete_address(self, command):
        repo = current_domain.repository_for(Address)
        address = repo.get(command.address_id)
        repo._dao.delete(address)
