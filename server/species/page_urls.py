"""
Browser page routing for species app.
"""
from django.urls import path
from . import pages

urlpatterns = [
    path('', pages.species_list, name='catalog'),
    path('add/', pages.add_species, name='catalog-add'),
    path('<int:pk>/', pages.species_detail, name='catalog-species'),
]
