"""Reusable UI components for the admin image page.

Each class builds one panel of the page inside the current ``gr.Blocks``
context and knows how to render the page state into updates for its own
components. Render methods return tuples in the same order as ``outputs()``
so they can be spliced directly into event handler return values.
"""

from typing import Any

import gradio as gr

from neonstudio.core.backend import ImageBackend

from .handlers.gallery import gallery_items
from .models import ALT_TEXT_LENGTH, CATEGORIES, PRESET_PROMPTS, AdminImagesState

GENERATE_LABEL = "Generate Image"
GENERATING_LABEL = "Generating..."
PREVIEW_EMPTY_TEXT = "*Generated image will appear here*"
PREVIEW_BUSY_TEXT = "**Creating your image...**\n\n*This may take 15-30 seconds*"
GALLERY_EMPTY_TEXT = "*No images generated yet. Create your first one above!*"
NO_SELECTION_TEXT = "*Select an image to delete it*"


class PromptFormUI:
    """Generator panel: preset buttons, prompt box, category and generate button."""

    def __init__(self, default_category: str = "gallery"):
        """Build the generator panel components.

        Args:
            default_category: Category preselected in the dropdown
        """
        gr.Markdown("### Generate New Image")

        gr.Markdown("Quick Presets")
        self.preset_buttons: dict[str, gr.Button] = {}
        with gr.Row():
            for preset in PRESET_PROMPTS:
                self.preset_buttons[preset.label] = gr.Button(
                    preset.label, size="sm", variant="secondary"
                )

        self.prompt = gr.Textbox(
            label="Custom Prompt",
            placeholder="Describe the image you want to generate...",
            lines=4,
        )

        # Dropdown shows labels but yields the category value
        self.category = gr.Dropdown(
            label="Category",
            choices=[(label, value) for value, label in CATEGORIES.items()],
            value=default_category,
            allow_custom_value=True,
        )

        self.generate_btn = gr.Button(GENERATE_LABEL, variant="primary", interactive=False)

    @staticmethod
    def render_button(state: AdminImagesState) -> dict[str, Any]:
        """Render the generate button (disabled while busy or with an empty prompt)."""
        label = GENERATING_LABEL if state.is_generating else GENERATE_LABEL
        return gr.update(value=label, interactive=state.can_generate())


class PreviewUI:
    """Preview panel showing the latest generated image and a download link."""

    def __init__(self):
        gr.Markdown("### Preview")
        self.status = gr.Markdown(PREVIEW_EMPTY_TEXT)
        self.image = gr.Image(
            label="Generated preview",
            interactive=False,
            visible=False,
            height=512,
        )
        # Opens the remote URL in a new tab; bytes are never fetched server-side
        self.download_btn = gr.Button("Download", size="sm", visible=False)

    def outputs(self) -> list[gr.components.Component]:
        """Return components updated by :meth:`render`, in order."""
        return [self.status, self.image, self.download_btn]

    @staticmethod
    def render(state: AdminImagesState) -> tuple[Any, Any, Any]:
        """Render the preview panel.

        Returns:
            Tuple of (status_update, image_update, download_button_update)
        """
        if state.is_generating:
            return (
                gr.update(value=PREVIEW_BUSY_TEXT, visible=True),
                gr.update(value=None, visible=False),
                gr.update(visible=False),
            )

        if state.preview_url:
            return (
                gr.update(value="", visible=False),
                gr.update(value=state.preview_url, visible=True),
                gr.update(link=state.preview_url, visible=True),
            )

        return (
            gr.update(value=PREVIEW_EMPTY_TEXT, visible=True),
            gr.update(value=None, visible=False),
            gr.update(visible=False),
        )


class GalleryUI:
    """Thumbnail grid of generated images with selection and delete."""

    def __init__(self):
        with gr.Row():
            self.title = gr.Markdown("### Generated Images (0)")
            self.refresh_btn = gr.Button("Refresh", size="sm", scale=0)

        self.empty = gr.Markdown(GALLERY_EMPTY_TEXT)
        self.gallery = gr.Gallery(
            label="Images",
            columns=4,
            height=600,
            object_fit="cover",
            allow_preview=True,
            show_label=False,
        )

        with gr.Row():
            self.selected = gr.Markdown(NO_SELECTION_TEXT)
            self.delete_btn = gr.Button("Delete", variant="stop", size="sm", interactive=False)

    def outputs(self) -> list[gr.components.Component]:
        """Return components updated by :meth:`render`, in order."""
        return [self.title, self.empty, self.gallery, self.selected, self.delete_btn]

    @staticmethod
    def render_selection(state: AdminImagesState) -> tuple[Any, Any]:
        """Render the selection line and the delete button.

        Returns:
            Tuple of (selected_markdown_update, delete_button_update)
        """
        image = state.selected_image()
        if image is None:
            return gr.update(value=NO_SELECTION_TEXT), gr.update(interactive=False)

        text = f"**{image.category.upper()}** {image.short_label(ALT_TEXT_LENGTH)}"
        return gr.update(value=text), gr.update(interactive=True)

    @classmethod
    def render(cls, state: AdminImagesState, backend: ImageBackend) -> tuple[Any, ...]:
        """Render the whole gallery panel.

        Returns:
            Tuple matching :meth:`outputs`
        """
        title = gr.update(value=f"### Generated Images ({len(state.images)})")
        empty = gr.update(visible=not state.images)
        gallery = gr.update(value=gallery_items(state, backend))
        return (title, empty, gallery, *cls.render_selection(state))
