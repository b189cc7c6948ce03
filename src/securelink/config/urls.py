"""securelink URL Configuration.

The rewrite rules come last: the hierarchical page rules match almost any path.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('securelink.rewrite.urls')),
]
