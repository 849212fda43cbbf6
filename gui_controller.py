import logging
import time

import dearpygui.dearpygui as dpg

from constants import FIELD_NAMES

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    'oscillator_amplitude': "Oscillator amplitude (1-200)",
    'oscillator_omega': "Oscillator omega",
    'spinner_amplitude': "Spinner amplitude (1-200)",
    'spinner_omega': "Spinner omega",
}


def _make_callbacks(shared):
    def field_cb(sender, app_data, user_data):
        shared[user_data] = app_data
    def apply_cb():
        shared['apply_config'] = True
    def exit_cb():
        shared['__exit__'] = True
    return field_cb, apply_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes the field texts and requests into
    `shared`; mirrors corrected values back into the widgets whenever the
    main process bumps 'config_revision'.
    """
    dpg.create_context()

    field_cb, apply_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="SHM Controls", tag="controls_window", width=380, height=300):
        dpg.add_text("Settings")
        dpg.add_spacer()
        for name in FIELD_NAMES:
            dpg.add_text(FIELD_LABELS[name])
            dpg.add_input_text(label=name.split('_')[-1].capitalize(), tag=f"{name}_input",
                               default_value=str(shared.get(name, '')),
                               callback=field_cb, user_data=name)
        dpg.add_separator()
        dpg.add_button(label="Apply", callback=lambda s, a, u: apply_cb())
        dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='SHM Controls', width=400, height=340)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    seen_revision = shared.get('config_revision', 0)
    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            revision = shared.get('config_revision', 0)
            if revision != seen_revision:
                # the main process corrected one or more fields
                for name in FIELD_NAMES:
                    dpg.set_value(f"{name}_input", str(shared.get(name, '')))
                seen_revision = revision

            status = "apply pending" if shared.get('apply_config', False) else f"revision {revision}"
            dpg.set_value("status_text", status)

            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()
        logger.info("Control panel closed")
        # closing the panel window ends the demo as well
        shared['__exit__'] = True
