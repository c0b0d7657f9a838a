from django.apps import AppConfig


class RestDocsConfig(AppConfig):
    name = "modules.restdocs"
    label = "restdocs"
    verbose_name = "REST Docs"
