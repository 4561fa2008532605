from django.urls import path
from . import views


app_name = 'projects'


urlpatterns = [
    path('', views.project_list, name='project_list'),
    path('reorder/', views.reorder_projects, name='reorder_projects'),
    path('roadmap/', views.roadmap, name='roadmap'),
    path('<int:project_id>/', views.project_detail, name='project_detail'),
    path('<int:project_id>/api/<str:kind>/', views.project_document_api, name='project_document_api'),
    path('<int:project_id>/api/<str:kind>/preview/', views.project_document_preview, name='project_document_preview'),
]
