"""Gradio UI for the Neon Studio admin image page."""

import logging
from collections.abc import Callable, Iterator
from functools import partial

import gradio as gr

from neonstudio.core.backend import ImageBackend, create_backend
from neonstudio.core.config import config

from .components import GalleryUI, PreviewUI, PromptFormUI
from .handlers import (
    begin_generation,
    delete_selected_image,
    fetch_images,
    generate_image,
    select_category,
    select_image,
    select_preset,
    update_prompt,
)
from .models import AdminImagesState
from .notifications import GradioNotifier
from .state import create_ui_state, initialize_ui_state

logger = logging.getLogger(__name__)


def create_ui(get_backend: Callable[[], ImageBackend]) -> gr.Blocks:
    """Create the admin image page.

    The backend is resolved through ``get_backend`` on every event rather
    than captured at build time, so the page can be built before the hosting
    application has connected to the backend.

    Args:
        get_backend: Callable returning the backend to use

    Returns:
        Gradio Blocks app
    """
    notifier = GradioNotifier()

    app = gr.Blocks(title="AI Image Generator")

    with app:
        # Session state - one instance per browser session
        ui_state = gr.State(create_ui_state(config.default_category))

        gr.Markdown("# AI Image Generator")

        with gr.Row():
            with gr.Column(scale=1):
                form = PromptFormUI(default_category=config.default_category)
            with gr.Column(scale=1):
                preview = PreviewUI()

        gallery = GalleryUI()

        gallery_outputs = gallery.outputs()
        page_outputs = [ui_state, form.generate_btn, *preview.outputs(), *gallery_outputs]

        def render_page(state: AdminImagesState) -> tuple:
            backend = get_backend()
            return (
                state,
                form.render_button(state),
                *preview.render(state),
                *gallery.render(state, backend),
            )

        # Initial gallery fetch on page load
        def load_wrapper(state: AdminImagesState) -> tuple:
            state = initialize_ui_state(state, get_backend())
            return render_page(state)

        app.load(fn=load_wrapper, inputs=[ui_state], outputs=page_outputs)

        # Preset buttons overwrite the prompt box
        def preset_wrapper(label: str, state: AdminImagesState) -> tuple:
            state = select_preset(label, state)
            return state.prompt, state, form.render_button(state)

        for label, button in form.preset_buttons.items():
            button.click(
                fn=partial(preset_wrapper, label),
                inputs=[ui_state],
                outputs=[form.prompt, ui_state, form.generate_btn],
            )

        def prompt_wrapper(text: str, state: AdminImagesState) -> tuple:
            state = update_prompt(text, state)
            return state, form.render_button(state)

        form.prompt.change(
            fn=prompt_wrapper,
            inputs=[form.prompt, ui_state],
            outputs=[ui_state, form.generate_btn],
        )

        def category_wrapper(category: str, state: AdminImagesState) -> AdminImagesState:
            return select_category(category, state)

        form.category.change(
            fn=category_wrapper,
            inputs=[form.category, ui_state],
            outputs=[ui_state],
        )

        # Generate button: render the busy state first, then the result
        def generate_wrapper(
            prompt: str, category: str, state: AdminImagesState
        ) -> Iterator[tuple]:
            state = update_prompt(prompt, state)
            state = select_category(category, state)

            if state.prompt.strip():
                begin_generation(state)
                yield render_page(state)

            state = generate_image(state, get_backend(), notifier)
            yield render_page(state)

        form.generate_btn.click(
            fn=generate_wrapper,
            inputs=[form.prompt, form.category, ui_state],
            outputs=page_outputs,
        )

        # Thumbnail selection
        def select_wrapper(evt: gr.SelectData, state: AdminImagesState) -> tuple:
            state = select_image(evt.index, state)
            return (state, *gallery.render_selection(state))

        gallery.gallery.select(
            fn=select_wrapper,
            inputs=[ui_state],
            outputs=[ui_state, gallery.selected, gallery.delete_btn],
        )

        def delete_wrapper(state: AdminImagesState) -> tuple:
            backend = get_backend()
            state = delete_selected_image(state, backend, notifier)
            return (state, *gallery.render(state, backend))

        gallery.delete_btn.click(
            fn=delete_wrapper,
            inputs=[ui_state],
            outputs=[ui_state, *gallery_outputs],
        )

        def refresh_wrapper(state: AdminImagesState) -> tuple:
            backend = get_backend()
            state = fetch_images(state, backend)
            return (state, *gallery.render(state, backend))

        gallery.refresh_btn.click(
            fn=refresh_wrapper,
            inputs=[ui_state],
            outputs=[ui_state, *gallery_outputs],
        )

    return app


def main():
    """Run the admin page as a standalone Gradio app."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting admin image page...")

    backend = create_backend(config)
    app = create_ui(lambda: backend)

    logger.info(f"Launching Gradio UI on {config.server_host}:{config.server_port}")

    app.queue().launch(
        server_name=config.server_host,
        server_port=config.server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
    )


if __name__ == "__main__":
    main()
