"""
Processor composition for the user management addon.

The user processor's identity behavior depends on ``user_processor``:

- the built-in ``UserProcessor``: deployer callbacks (or no-op fallbacks),
  wrapped in a ``CallbackIdentityPolicy``
- a ``UserProcessor`` subclass: that class's own ``generate_id``/``encrypt_password``
- any other class: a ``UserProcessor`` borrowing those two hooks from an
  instance of the class; a hook the class lacks raises ``InvocationError``
  when called

For custom classes the callback options are ignored.
"""
from .options import UserManagementOptions, bind_unsafe_default
from .policies import BorrowedIdentityPolicy, CallbackIdentityPolicy, CallbackLoginPolicy
from ...framework import Application, ResourceType, SessionProcessor, UserProcessor


def compose_user_processor(app: Application, options: UserManagementOptions) -> UserProcessor:
    """Create the processor for ``options.user_resource``."""
    if options.user_processor is UserProcessor:
        policy = CallbackIdentityPolicy(
            generate_id_callback=options.user_generate_id_callback,
            encrypt_password_callback=bind_unsafe_default(
                options.user_encrypt_password_callback, app.diagnostics, source='UserManagementAddon'),
        )
        return UserProcessor(app, options.user_resource, identity_policy=policy)

    # custom processors carry their own identity policy
    custom = options.user_processor(app, options.user_resource)
    if isinstance(custom, UserProcessor):
        return custom
    return UserProcessor(app, options.user_resource, identity_policy=BorrowedIdentityPolicy(custom))


def compose_session_processor(
        app: Application,
        session_resource: ResourceType,
        options: UserManagementOptions,
) -> SessionProcessor:
    """Create the processor for the synthesized session resource."""
    login_callback = bind_unsafe_default(options.user_login_callback, app.diagnostics, source='UserManagementAddon')
    return SessionProcessor(
        app,
        session_resource,
        login_policy=CallbackLoginPolicy(login_callback),
        username_parameter=options.username_request_parameter,
    )
