"""Admin image page: session state, handlers and the Gradio interface."""
