"""English / Spanish labels for the UI."""

from __future__ import annotations

from typing import Dict

LANGUAGES = ("es", "en")

LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "app.title": "Research Lab",
        "nav.home": "Home",
        "nav.team": "Team",
        "nav.projects": "Projects",
        "nav.announcements": "Announcements",
        "nav.calendar": "Calendar",
        "nav.admin": "Admin",
        "auth.sign_in": "Sign in with Google",
        "auth.sign_out": "Sign out",
        "auth.verifying": "Verifying authentication...",
        "auth.completing": "Completing authentication...",
        "auth.denied": "You need administrator access to view this page.",
        "common.loading": "Loading...",
        "common.back": "Back",
        "common.view": "View",
        "common.none": "Nothing to show yet.",
        "common.load_failed": "Some content could not be loaded",
        "home.subtitle": "Research, projects and people of our group.",
        "home.projects": "Projects",
        "home.members": "Members",
        "home.featured": "Featured projects",
        "team.title": "Our team",
        "team.projects": "Projects",
        "team.research_areas": "Research areas",
        "team.not_found": "Team member not found.",
        "projects.title": "Projects",
        "projects.team": "Project team",
        "projects.images": "Images",
        "projects.files": "Files",
        "projects.not_found": "Project not found.",
        "announcements.title": "Announcements",
        "calendar.title": "Upcoming events",
        "status.active": "Active",
        "status.completed": "Completed",
        "status.on-hold": "On hold",
        "status.unknown": "Unknown",
        "type.meeting": "Meeting",
        "type.deadline": "Deadline",
        "type.conference": "Conference",
        "type.other": "Other",
        "admin.dashboard": "Admin dashboard",
        "admin.welcome": "Welcome back, {name}",
        "admin.overview": "Overview",
        "admin.team": "Manage team",
        "admin.projects": "Manage projects",
        "admin.announcements": "Manage announcements",
        "admin.events": "Manage events",
        "admin.add": "Add new",
        "admin.edit": "Edit",
        "admin.delete": "Delete",
        "admin.save": "Save",
        "admin.cancel": "Cancel",
        "admin.search": "Search",
        "admin.filter": "Filter",
        "admin.all": "All",
        "admin.active": "Active",
        "admin.inactive": "Inactive",
        "admin.confirm_delete": "Are you sure you want to delete this item? This cannot be undone.",
        "admin.saved": "Saved.",
        "admin.deleted": "Deleted.",
        "admin.error.validation": "Please check the form: {message}",
        "admin.error.transport": "Could not save. Please try again.",
        "admin.error.auth": "Your session has expired. Please sign in again.",
        "admin.error.error": "Something went wrong: {message}",
        "admin.quick_actions": "Quick actions",
        "admin.recent_activity": "Recent activity",
        "admin.total_members": "Team members",
        "admin.active_projects": "Active projects",
        "admin.total_announcements": "Announcements",
        "admin.upcoming_events": "Upcoming events",
        "activity.project": "New project: {title}",
        "activity.announcement": "New announcement: {title}",
        "field.name": "Name",
        "field.role": "Role",
        "field.email": "Email",
        "field.avatar_url": "Avatar URL",
        "field.github_url": "GitHub URL",
        "field.linkedin_url": "LinkedIn URL",
        "field.research_areas": "Research areas (comma separated)",
        "field.bio": "Biography",
        "field.is_active": "Active member",
        "field.description": "Description",
        "field.content": "Content",
        "field.images": "Image URLs (one per line)",
        "field.files": "File URLs (one per line)",
        "field.team_members": "Team members",
        "field.status": "Status",
        "field.title": "Title",
        "field.date": "Date",
        "field.time": "Time",
        "field.location": "Location",
        "field.type": "Type",
        "field.links": "Links (one per line)",
    },
    "es": {
        "app.title": "Laboratorio de Investigación",
        "nav.home": "Inicio",
        "nav.team": "Equipo",
        "nav.projects": "Proyectos",
        "nav.announcements": "Anuncios",
        "nav.calendar": "Calendario",
        "nav.admin": "Administración",
        "auth.sign_in": "Iniciar sesión con Google",
        "auth.sign_out": "Cerrar sesión",
        "auth.verifying": "Verificando autenticación...",
        "auth.completing": "Completando autenticación...",
        "auth.denied": "Necesitas acceso de administrador para ver esta página.",
        "common.loading": "Cargando...",
        "common.back": "Volver",
        "common.view": "Ver",
        "common.none": "Todavía no hay nada que mostrar.",
        "common.load_failed": "No se pudo cargar parte del contenido",
        "home.subtitle": "Investigación, proyectos y personas de nuestro grupo.",
        "home.projects": "Proyectos",
        "home.members": "Miembros",
        "home.featured": "Proyectos destacados",
        "team.title": "Nuestro equipo",
        "team.projects": "Proyectos",
        "team.research_areas": "Áreas de investigación",
        "team.not_found": "Miembro del equipo no encontrado.",
        "projects.title": "Proyectos",
        "projects.team": "Equipo del proyecto",
        "projects.images": "Imágenes",
        "projects.files": "Archivos",
        "projects.not_found": "Proyecto no encontrado.",
        "announcements.title": "Anuncios",
        "calendar.title": "Próximos eventos",
        "status.active": "Activo",
        "status.completed": "Completado",
        "status.on-hold": "En pausa",
        "status.unknown": "Desconocido",
        "type.meeting": "Reunión",
        "type.deadline": "Fecha límite",
        "type.conference": "Conferencia",
        "type.other": "Otro",
        "admin.dashboard": "Panel de administración",
        "admin.welcome": "Bienvenido de vuelta, {name}",
        "admin.overview": "Resumen",
        "admin.team": "Gestionar equipo",
        "admin.projects": "Gestionar proyectos",
        "admin.announcements": "Gestionar anuncios",
        "admin.events": "Gestionar eventos",
        "admin.add": "Agregar",
        "admin.edit": "Editar",
        "admin.delete": "Eliminar",
        "admin.save": "Guardar",
        "admin.cancel": "Cancelar",
        "admin.search": "Buscar",
        "admin.filter": "Filtrar",
        "admin.all": "Todos",
        "admin.active": "Activos",
        "admin.inactive": "Inactivos",
        "admin.confirm_delete": "¿Estás seguro de que quieres eliminar este elemento? No se puede deshacer.",
        "admin.saved": "Guardado.",
        "admin.deleted": "Eliminado.",
        "admin.error.validation": "Revisa el formulario: {message}",
        "admin.error.transport": "No se pudo guardar. Por favor, intenta de nuevo.",
        "admin.error.auth": "Tu sesión ha expirado. Inicia sesión de nuevo.",
        "admin.error.error": "Algo salió mal: {message}",
        "admin.quick_actions": "Acciones rápidas",
        "admin.recent_activity": "Actividad reciente",
        "admin.total_members": "Miembros del equipo",
        "admin.active_projects": "Proyectos activos",
        "admin.total_announcements": "Anuncios",
        "admin.upcoming_events": "Próximos eventos",
        "activity.project": "Nuevo proyecto: {title}",
        "activity.announcement": "Nuevo anuncio: {title}",
        "field.name": "Nombre",
        "field.role": "Rol",
        "field.email": "Email",
        "field.avatar_url": "URL del avatar",
        "field.github_url": "URL de GitHub",
        "field.linkedin_url": "URL de LinkedIn",
        "field.research_areas": "Áreas de investigación (separadas por comas)",
        "field.bio": "Biografía",
        "field.is_active": "Miembro activo",
        "field.description": "Descripción",
        "field.content": "Contenido",
        "field.images": "URLs de imágenes (una por línea)",
        "field.files": "URLs de archivos (una por línea)",
        "field.team_members": "Miembros del equipo",
        "field.status": "Estado",
        "field.title": "Título",
        "field.date": "Fecha",
        "field.time": "Hora",
        "field.location": "Ubicación",
        "field.type": "Tipo",
        "field.links": "Enlaces (uno por línea)",
    },
}


def translate(key: str, lang: str = "es", **kwargs: str) -> str:
    """Label for `key`, falling back to English and then to the key itself."""
    text = LABELS.get(lang, {}).get(key) or LABELS["en"].get(key) or key
    return text.format(**kwargs) if kwargs else text
