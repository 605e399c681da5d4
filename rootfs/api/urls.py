from django.conf import settings
from django.urls import re_path

from api import views


app_urlpatterns = [
    re_path(
        r'^httproutes/validate/?$',
        views.HTTPRouteViewSet.as_view({'post': 'validate'})
    ),
]

admission_urlpatterns = [
    re_path(
        r'^admissions/(?P<key>[^/]+)/?$',
        views.AdmissionWebhookViewSet.as_view({'post': 'handle'})
    ),
]

# The admission webhook is only served when an admission key is configured
if settings.ADMISSION_KEY:
    urlpatterns = app_urlpatterns + admission_urlpatterns
else:
    urlpatterns = app_urlpatterns
