from django.contrib import admin

from hireflow.organization.models import Agency, Client


class AgencyAdmin(admin.ModelAdmin):
    search_fields = ('name', 'slug')
    list_display = ('name', 'slug', 'created_at')
    filter_horizontal = ('administrators',)


class ClientAdmin(admin.ModelAdmin):
    search_fields = ('name', 'contact_name', 'contact_email')
    list_display = ('name', 'agency', 'contact_email')
    list_filter = ('agency',)


admin.site.register(Agency, AgencyAdmin)
admin.site.register(Client, ClientAdmin)
