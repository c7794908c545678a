from django.urls import path, include
from .routers import router
from shops.views import unique_states, unique_districts, unique_talukas, unique_villages

urlpatterns = [
    path('api/', include(router.urls)),
    path('api/states', unique_states, name='unique-states'),
    path('api/districts', unique_districts, name='unique-districts'),
    path('api/talukas', unique_talukas, name='unique-talukas'),
    path('api/villages', unique_villages, name='unique-villages'),
]
