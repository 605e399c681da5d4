from django import apps


class AppConfig(apps.AppConfig):
    name = 'api'
    verbose_name = 'routecheck'
