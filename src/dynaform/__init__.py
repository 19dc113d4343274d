"""
Dynaform - Formularios dinámicos en terminal.

Un registro estático de esquemas define los campos de cada tipo de
formulario. El controlador de estado (funciones puras sobre AppState)
maneja respuestas, errores y progreso, y el almacén de envíos guarda
los registros enviados durante la sesión.
"""

__version__ = "1.0.0"
