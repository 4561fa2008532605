from django.contrib import admin
from .models import Profile, UserPreferences, CompanyInfo


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'name', 'role', 'company', 'updated_at')
    search_fields = ('user__username', 'name', 'company')


@admin.register(UserPreferences)
class UserPreferencesAdmin(admin.ModelAdmin):
    list_display = ('user', 'prd_template_style', 'spec_template_style', 'communication_style')


@admin.register(CompanyInfo)
class CompanyInfoAdmin(admin.ModelAdmin):
    list_display = ('user', 'company_name', 'industry', 'size')
    search_fields = ('company_name', 'industry', 'user__username')
