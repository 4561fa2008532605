from django.urls import path
from . import views

urlpatterns = [
    path('register/', views.register, name='register'),
    path('login/', views.auth, name='login'),
    path('logout/', views.logout_view, name='logout'),
    path('profile/', views.profile, name='profile'),
    path('preferences/', views.preferences, name='preferences'),
    path('company-info/', views.company_info, name='company_info'),
]
