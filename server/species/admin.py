"""
Admin configuration for species app.
"""
from django.contrib import admin
from .models import Species


@admin.register(Species)
class SpeciesAdmin(admin.ModelAdmin):
    """Admin interface for Species model."""
    list_display = [
        'id',
        'scientific_name',
        'common_name',
        'kingdom',
        'total_population',
        'author',
        'created_at',
    ]
    list_filter = ['kingdom', 'created_at']
    search_fields = ['scientific_name', 'common_name', 'author__username']
    readonly_fields = ['id', 'author', 'created_at', 'updated_at']
    ordering = ['-id']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'scientific_name', 'common_name', 'kingdom')
        }),
        ('Details', {
            'fields': ('total_population', 'image', 'description')
        }),
        ('Metadata', {
            'fields': ('author', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related('author')

    def save_model(self, request, obj, form, change):
        """Entries created here belong to the admin who created them."""
        if not change:
            obj.author = request.user
        super().save_model(request, obj, form, change)
