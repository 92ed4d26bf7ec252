from django.contrib import admin

from hireflow.recruitment.models import (
    Application,
    ClientFeedback,
    Job,
    Shortlist,
    ShortlistItem,
)


class JobAdmin(admin.ModelAdmin):
    search_fields = ('title', 'agency__name')
    list_display = ('title', 'agency', 'client', 'status', 'created_at')
    list_filter = ('status', 'agency')


class ApplicationAdmin(admin.ModelAdmin):
    search_fields = ('full_name', 'email', 'job__title')
    list_display = ('full_name', 'job', 'agency', 'status', 'modified_at')
    list_filter = ('status', 'agency')


class ShortlistItemInline(admin.TabularInline):
    model = ShortlistItem
    extra = 0
    raw_id_fields = ('application',)


class ShortlistAdmin(admin.ModelAdmin):
    search_fields = ('name', 'job__title', 'client__name')
    list_display = ('name', 'agency', 'job', 'client', 'created_at')
    list_filter = ('agency',)
    readonly_fields = ('share_token',)
    inlines = (ShortlistItemInline,)


class ClientFeedbackAdmin(admin.ModelAdmin):
    list_display = ('shortlist', 'application', 'decision', 'modified_at')
    list_filter = ('decision', 'agency')


admin.site.register(Job, JobAdmin)
admin.site.register(Application, ApplicationAdmin)
admin.site.register(Shortlist, ShortlistAdmin)
admin.site.register(ClientFeedback, ClientFeedbackAdmin)
