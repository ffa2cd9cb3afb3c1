from marshmallow import EXCLUDE, Schema, ValidationError, fields

# Request fields are all optional at the schema level.
# Presence checks happen in the auth service; unknown keys (e.g. a spoofed userId) are dropped.

class BaseSchema(Schema):
    class Meta:
        unknown = EXCLUDE


# Accepts "2025-06-30" as well as full ISO datetimes like "2025-06-30T00:00:00.000Z"
class DueDateField(fields.Date):
    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return super()._deserialize(value, attr, data, **kwargs)
        except ValidationError as date_error:
            try:
                return fields.DateTime()._deserialize(value, attr, data, **kwargs).date()
            except ValidationError:
                raise date_error from None


# --- Accounts ---

class UserRegisterSchema(BaseSchema):
    username = fields.Str(allow_none = True)
    email = fields.Str(allow_none = True)
    # Password is load_only, so it's never dumped.
    password = fields.Str(allow_none = True, load_only = True)


class UserLoginSchema(BaseSchema):
    email = fields.Str(allow_none = True)
    password = fields.Str(allow_none = True, load_only = True)


class MessageSchema(Schema):
    message = fields.Str()


class UserRegisteredSchema(MessageSchema):
    user_id = fields.Int(data_key = "userId")


# --- Projects ---

class ProjectSchema(BaseSchema):
    id = fields.Int(dump_only = True)
    name = fields.Str(allow_none = True)
    description = fields.Str(allow_none = True)
    status = fields.Str(allow_none = True)
    due_date = DueDateField(data_key = "dueDate", allow_none = True)
    # Always the authenticated user, never read from the request
    user_id = fields.Int(data_key = "userId", dump_only = True)
    created_at = fields.DateTime(data_key = "createdAt", dump_only = True)
    updated_at = fields.DateTime(data_key = "updatedAt", dump_only = True)


# --- Tasks ---

class TaskSchema(BaseSchema):
    id = fields.Int(dump_only = True)
    title = fields.Str(allow_none = True)
    description = fields.Str(allow_none = True)
    completed = fields.Bool(allow_none = True)
    priority = fields.Str(allow_none = True)
    due_date = DueDateField(data_key = "dueDate", allow_none = True)
    project_id = fields.Int(data_key = "projectId", allow_none = True)
    created_at = fields.DateTime(data_key = "createdAt", dump_only = True)
    updated_at = fields.DateTime(data_key = "updatedAt", dump_only = True)
