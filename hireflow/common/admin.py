from django.contrib import admin

from hireflow.common.models import EventLog


class EventLogAdmin(admin.ModelAdmin):
    list_display = ('type', 'agency', 'application', 'created_at')
    list_filter = ('type',)
    search_fields = ('agency__name',)
    readonly_fields = ('agency', 'type', 'application', 'payload', 'created_at', 'modified_at')

    def has_change_permission(self, request, obj=None):
        return False


admin.site.register(EventLog, EventLogAdmin)
