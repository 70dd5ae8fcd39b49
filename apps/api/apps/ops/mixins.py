"""ViewSet mixins for admin-managed resources."""
from .models import AuditActionChoices, log_admin_action


class AuditedAdminWriteMixin:
    """
    Records every create/update/delete in the admin audit log.

    Subclasses set ``audit_resource_type``.
    """

    audit_resource_type = None

    def perform_create(self, serializer):
        instance = serializer.save()
        log_admin_action(
            self.request.user,
            AuditActionChoices.CREATE,
            self.audit_resource_type,
            instance.pk,
            details={'after': serializer.data},
            request=self.request,
        )

    def perform_update(self, serializer):
        changed_fields = sorted(serializer.validated_data.keys())
        instance = serializer.save()
        log_admin_action(
            self.request.user,
            AuditActionChoices.UPDATE,
            self.audit_resource_type,
            instance.pk,
            details={'changed_fields': changed_fields, 'after': serializer.data},
            request=self.request,
        )

    def perform_destroy(self, instance):
        resource_id = instance.pk
        before = self.get_serializer(instance).data
        instance.delete()
        log_admin_action(
            self.request.user,
            AuditActionChoices.DELETE,
            self.audit_resource_type,
            resource_id,
            details={'before': before},
            request=self.request,
        )
