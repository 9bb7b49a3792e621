"""
Centralized UI labels for the canvas.
Keep copy consistent across components.
"""

# Header
EYEBROW = "Canvas sin fricción"
SUBHEAD = (
    "Completa cada bloque, avanza con los botones o las migas y exporta un archivo "
    "listo para compartir."
)
BTN_EXPORT = "Exportar respuestas"
BTN_LOAD = "Cargar archivo"

# Navigation
NAV_ARIA = "Progreso del formulario"
BTN_BACK = "Anterior"

# Page form
FIELD_PLACEHOLDER = "Escribe tu respuesta..."

# Summary
SUMMARY_TITLE = "Resumen general"
SUMMARY_HINT = (
    "Revisa y descarga tus respuestas. Puedes regresar para editar cualquier bloque "
    "antes de exportar."
)
SUMMARY_EMPTY = "Sin respuesta"

# Drop overlay
DROP_TITLE = "Soltá el archivo exportado para cargar las respuestas."
DROP_HINT = 'También podés usar el botón "Cargar archivo".'

# Banner colors per status kind
STATUS_COLORS = {
    "success": ('bg-emerald-50', 'border-emerald-300', 'text-emerald-800'),
    "error": ('bg-red-50', 'border-red-300', 'text-red-800'),
}

BREADCRUMB_CLASSES = {
    "active": 'bg-blue-700 text-white',
    "complete": 'bg-blue-100 text-blue-800',
    "pending": 'bg-white text-gray-500',
}
