from sqladmin import ModelView

from jalanma.report.models import RoadDamageReport
from jalanma.user.models import User


class UserAdmin(ModelView, model=User):
    name = "User"
    name_plural = "Users"
    icon = "fa-solid fa-user"

    column_list = [
        User.email,
        User.name,
        User.provider,
        User.id,
        User.created_at,
        User.updated_at,
    ]

    column_searchable_list = [User.email, User.name]

    column_sortable_list = [getattr(User, field) for field in User.model_fields]

    # Provider is fixed once the account exists.
    form_excluded_columns = [User.provider, User.created_at, User.updated_at]


class RoadDamageReportAdmin(ModelView, model=RoadDamageReport):
    name = "Road Damage Report"
    name_plural = "Road Damage Reports"
    icon = "fa-solid fa-road"

    column_list = [
        RoadDamageReport.id,
        RoadDamageReport.status,
        RoadDamageReport.reporter_name,
        RoadDamageReport.reporter_phone,
        RoadDamageReport.report_date,
        RoadDamageReport.latitude,
        RoadDamageReport.longitude,
        RoadDamageReport.user_id,
        RoadDamageReport.created_at,
    ]

    column_searchable_list = [
        RoadDamageReport.reporter_name,
        RoadDamageReport.reporter_address,
        RoadDamageReport.damage_description,
    ]

    column_sortable_list = [
        getattr(RoadDamageReport, field) for field in RoadDamageReport.model_fields
    ]

    column_default_sort = [(RoadDamageReport.created_at, True)]

    form_excluded_columns = [RoadDamageReport.created_at, RoadDamageReport.updated_at]

    # Reports are never deleted through the API either.
    can_delete = False
