from django.urls import path
from . import views


urlpatterns = [
    path('api/chat/', views.chat_api, name='chat_api'),
    path('api/projects/<int:project_id>/conversations/', views.conversation_list, name='conversation_list'),
    path('api/conversations/<int:conversation_id>/', views.conversation_detail, name='conversation_detail_api'),
]
