from django.urls import path
from . import views

app_name = 'documents'

urlpatterns = [
    path('', views.template_list, name='template_list'),
    path('<str:template_type>/', views.template_detail, name='template_detail'),
    path('<str:template_type>/reset/', views.reset_template, name='reset_template'),
]
