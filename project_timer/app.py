"""
Project Timer window - planning view for the project list, run view for
the countdown. The window only reacts to engine signals; all sequencing
lives in CountdownEngine.
"""

import logging
import tkinter as tk
from tkinter import ttk, filedialog

from .config import ConfigManager
from .display import format_time, random_background
from .engine import BACKWARD, FORWARD, CountdownEngine
from .notify import NotificationManager
from .registry import ProjectRegistry
from .sound import SOUND_NAMES, SoundManager

logger = logging.getLogger(__name__)

FONT = 'Arial'


class ProjectTimerApp:
    def __init__(self, root, config=None, sound=None, notifier=None):
        self.root = root
        self.root.title("Project Timer")

        # Managers
        self.config = config or ConfigManager()
        self.sound_mgr = sound or SoundManager(custom_sound=self.config.get("custom_sound"))
        self.notif_mgr = notifier or NotificationManager(enabled=self.config.get("notifications", True))

        # Logic objects
        self.registry = ProjectRegistry()
        self.engine = CountdownEngine(
            scheduler=self.root,
            on_project_changed=self.on_project_changed,
            on_alarm=self.on_alarm,
            on_run_complete=self.on_run_complete,
            on_update=self.on_update,
        )

        # State
        self.current_sound = self.config.get("sound", "Chime")
        self.idle_background = self.config.get("idle_background", "#ffffff")
        self.background = self.idle_background
        self.editing_id = None
        self.fullscreen = False

        # Setup
        self.root.geometry(self.config.get("window_geometry", "560x560"))
        self.root.minsize(420, 360)
        self._setup_ui()
        self._setup_keybindings()
        self._show_planning()

    # ===================== UI =====================

    def _setup_ui(self):
        self.main = tk.Frame(self.root)
        self.main.pack(fill=tk.BOTH, expand=True)
        self._create_planning_view()
        self._create_run_view()

    def _create_planning_view(self):
        f = tk.Frame(self.main, padx=16, pady=12)

        top = tk.Frame(f)
        top.pack(fill=tk.X, pady=(0, 8))
        tk.Label(top, text="⏱ Project Timer", font=(FONT, 18, 'bold')).pack(side=tk.LEFT)

        self.sound_var = tk.StringVar(value=self.current_sound)
        ttk.Combobox(top, textvariable=self.sound_var, values=SOUND_NAMES,
                     width=8, state="readonly", font=(FONT, 9)).pack(side=tk.RIGHT)
        self.sound_var.trace_add('write', lambda *a: self._change_sound())
        tk.Button(top, text="🔊", command=lambda: self.sound_mgr.play(self.current_sound),
                  font=(FONT, 9), relief='flat', padx=4).pack(side=tk.RIGHT, padx=2)

        # Name / duration inputs
        form = tk.Frame(f)
        form.pack(fill=tk.X, pady=4)

        tk.Label(form, text="Project name", font=(FONT, 9)).grid(row=0, column=0, sticky='w')
        self.name_entry = tk.Entry(form, font=(FONT, 12))
        self.name_entry.grid(row=1, column=0, sticky='ew', padx=(0, 8))

        tk.Label(form, text="Minutes", font=(FONT, 9)).grid(row=0, column=1, sticky='w')
        self.minutes_entry = tk.Spinbox(form, from_=1, to=999, width=5,
                                        font=(FONT, 12), justify='center')
        self.minutes_entry.grid(row=1, column=1)
        form.columnconfigure(0, weight=1)

        self.name_entry.bind('<Return>', lambda e: self._submit_form())
        self.minutes_entry.bind('<Return>', lambda e: self._submit_form())

        btn_f = tk.Frame(f)
        btn_f.pack(fill=tk.X, pady=6)
        self.add_btn = tk.Button(btn_f, text="+ Add project", command=self._submit_form,
                                 font=(FONT, 10, 'bold'), relief='flat', pady=4)
        self.add_btn.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.cancel_edit_btn = tk.Button(btn_f, text="Cancel", command=self._cancel_edit,
                                         font=(FONT, 10), relief='flat', pady=4)

        # Project list (scrollable)
        list_frame = tk.Frame(f)
        list_frame.pack(fill=tk.BOTH, expand=True, pady=4)

        canvas = tk.Canvas(list_frame, height=160, highlightthickness=0)
        scrollbar = ttk.Scrollbar(list_frame, orient="vertical", command=canvas.yview)
        self.rows_frame = tk.Frame(canvas)
        self.rows_frame.bind(
            "<Configure>",
            lambda e: canvas.configure(scrollregion=canvas.bbox("all"))
        )
        canvas.create_window((0, 0), window=self.rows_frame, anchor="nw")
        canvas.configure(yscrollcommand=scrollbar.set)
        canvas.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        self.total_lbl = tk.Label(f, font=(FONT, 9))
        self.total_lbl.pack(pady=(4, 0))

        self.start_btn = tk.Button(f, text="▶ Start", command=lambda: self.start_run(0),
                                   font=(FONT, 12, 'bold'), relief='flat', pady=6)
        self.start_btn.pack(fill=tk.X, pady=6)

        self.planning_view = f

    def _create_run_view(self):
        f = tk.Frame(self.main)

        controls = tk.Frame(f)
        controls.pack(anchor='ne', padx=8, pady=8)
        self.fullscreen_btn = tk.Button(controls, text="⛶", command=self.toggle_fullscreen,
                                        font=(FONT, 11), relief='flat', padx=8)
        self.fullscreen_btn.pack(side=tk.LEFT, padx=1)
        self.pause_btn = tk.Button(controls, text="⏸", command=self.toggle_pause,
                                   font=(FONT, 11), relief='flat', padx=8)
        self.pause_btn.pack(side=tk.LEFT, padx=1)
        tk.Button(controls, text="⏹", command=self.exit_run,
                  font=(FONT, 11), relief='flat', padx=8).pack(side=tk.LEFT, padx=1)

        center = tk.Frame(f)
        center.pack(expand=True)
        self.project_lbl = tk.Label(center, font=(FONT, 36, 'bold'))
        self.project_lbl.pack(pady=(0, 8))
        self.time_lbl = tk.Label(center, text="00:00", font=('Courier', 72, 'bold'))
        self.time_lbl.pack()
        self.progress_lbl = tk.Label(center, font=(FONT, 11))
        self.progress_lbl.pack(pady=4)

        nav = tk.Frame(center)
        nav.pack(pady=12)
        self.prev_btn = tk.Button(nav, text="◀", command=lambda: self.navigate(BACKWARD),
                                  font=(FONT, 14), relief='flat', padx=12)
        self.prev_btn.pack(side=tk.LEFT, padx=4)
        self.next_btn = tk.Button(nav, text="▶", command=lambda: self.navigate(FORWARD),
                                  font=(FONT, 14), relief='flat', padx=12)
        self.next_btn.pack(side=tk.LEFT, padx=4)

        self.run_view = f

    def _setup_keybindings(self):
        """Keyboard shortcuts (only act during a run)"""
        self.root.bind('<space>', self._key_space)
        self.root.bind('<Left>', lambda e: self._key_navigate(BACKWARD))
        self.root.bind('<Right>', lambda e: self._key_navigate(FORWARD))
        self.root.bind('<F11>', lambda e: self.toggle_fullscreen())
        self.root.bind('f', self._key_fullscreen)
        self.root.bind('<Escape>', lambda e: self._key_escape())

    def _key_space(self, event):
        if self.engine.active and event.widget is not self.name_entry:
            self.toggle_pause()

    def _key_navigate(self, direction):
        if self.engine.active:
            self.navigate(direction)

    def _key_fullscreen(self, event):
        if self.engine.active:
            self.toggle_fullscreen()

    def _key_escape(self):
        if self.fullscreen:
            self._set_fullscreen(False)
        elif self.engine.active:
            self.exit_run()

    # ===================== PLANNING =====================

    def _show_planning(self):
        self.run_view.pack_forget()
        self.planning_view.pack(fill=tk.BOTH, expand=True)
        self._refresh_rows()

    def _show_run(self):
        self.planning_view.pack_forget()
        self.run_view.pack(fill=tk.BOTH, expand=True)

    def _submit_form(self):
        name = self.name_entry.get()
        minutes = self.minutes_entry.get()
        if self.editing_id is None:
            project = self.registry.add(name, minutes)
        else:
            project = self.registry.edit(self.editing_id, name, minutes)
        if project is None:
            self.root.bell()
            return
        self._reset_form()
        self._refresh_rows()

    def _start_edit(self, project):
        self.editing_id = project.id
        self.name_entry.delete(0, tk.END)
        self.name_entry.insert(0, project.name)
        self.minutes_entry.delete(0, tk.END)
        self.minutes_entry.insert(0, str(project.minutes))
        self.add_btn.config(text="✓ Save")
        self.cancel_edit_btn.pack(side=tk.LEFT, padx=(4, 0))
        self.name_entry.focus_set()
        self._refresh_rows()

    def _cancel_edit(self):
        self._reset_form()
        self._refresh_rows()

    def _reset_form(self):
        self.editing_id = None
        self.name_entry.delete(0, tk.END)
        self.minutes_entry.delete(0, tk.END)
        self.minutes_entry.insert(0, "1")
        self.add_btn.config(text="+ Add project")
        self.cancel_edit_btn.pack_forget()

    def _delete_project(self, project):
        if project.id == self.editing_id:
            self._reset_form()
        self.registry.delete(project.id)
        self._refresh_rows()

    def _refresh_rows(self):
        for widget in self.rows_frame.winfo_children():
            widget.destroy()

        for index, project in enumerate(self.registry):
            row = tk.Frame(self.rows_frame, pady=2)
            row.pack(fill=tk.X)
            marker = "✎ " if project.id == self.editing_id else ""
            tk.Label(row, text=f"{marker}{project.name}", font=(FONT, 12, 'bold'),
                     anchor='w', width=24).pack(side=tk.LEFT, padx=4)
            tk.Label(row, text=format_time(project.duration),
                     font=(FONT, 11)).pack(side=tk.LEFT, padx=4)

            tk.Button(row, text="×", command=lambda p=project: self._delete_project(p),
                      font=(FONT, 10), relief='flat', padx=4).pack(side=tk.RIGHT)
            tk.Button(row, text="✎", command=lambda p=project: self._start_edit(p),
                      font=(FONT, 10), relief='flat', padx=4).pack(side=tk.RIGHT)
            tk.Button(row, text="▶", command=lambda i=index: self.start_run(i),
                      font=(FONT, 10), relief='flat', padx=4).pack(side=tk.RIGHT)

        count = len(self.registry)
        self.total_lbl.config(
            text=f"{count} project(s), {format_time(self.registry.total_duration())} total" if count else ""
        )
        self.start_btn.config(state='normal' if count else 'disabled')
        self._apply_background(self.background)

    def _change_sound(self):
        self.current_sound = self.sound_var.get()
        self.config.set("sound", self.current_sound)

        if self.current_sound == "Custom":
            path = filedialog.askopenfilename(
                title="Select Sound",
                filetypes=[("Audio", "*.wav *.mp3 *.ogg"), ("All", "*.*")]
            )
            if path:
                self.sound_mgr.custom_sound = path
                self.config.set("custom_sound", path)
            elif not self.sound_mgr.custom_sound:
                self.sound_var.set("Chime")

    # ===================== RUN CONTROL =====================

    def start_run(self, index=0):
        if self.editing_id is not None:
            self._reset_form()
        if self.engine.start(self.registry.list(), index):
            self._show_run()
            self._update_run_controls()

    def toggle_pause(self):
        self.engine.toggle_pause()
        self._update_run_controls()

    def navigate(self, direction):
        self.engine.navigate(direction)
        self._update_run_controls()

    def exit_run(self):
        self.engine.exit()

    def _update_run_controls(self):
        engine = self.engine
        if not engine.active:
            return
        self.pause_btn.config(text="▶" if engine.paused else "⏸")
        self.prev_btn.config(state='normal' if engine.can_navigate(BACKWARD) else 'disabled')
        self.next_btn.config(state='normal' if engine.can_navigate(FORWARD) else 'disabled')
        self.progress_lbl.config(
            text=f"{engine.current_index + 1} / {len(engine.sequence)}"
            + ("  ·  paused" if engine.paused else "")
        )

    # ===================== ENGINE SIGNALS =====================

    def on_project_changed(self, project):
        self.project_lbl.config(text=project.name)
        self._apply_background(random_background(
            saturation=self.config.get("background_saturation", 0.7),
            lightness=self.config.get("background_lightness", 0.8),
        ))
        self._update_run_controls()

    def on_update(self, remaining):
        self.time_lbl.config(text=format_time(remaining))

    def on_alarm(self):
        project = self.engine.current_project
        self.sound_mgr.play(self.current_sound)
        if project is not None:
            self.notif_mgr.show("⏰ Project Timer", f"Time's up: {project.name}")

    def on_run_complete(self):
        self._set_fullscreen(False)
        self._apply_background(self.idle_background)
        self._show_planning()

    # ===================== WINDOW =====================

    def toggle_fullscreen(self):
        self._set_fullscreen(not self.fullscreen)

    def _set_fullscreen(self, enabled):
        if enabled == self.fullscreen:
            return
        try:
            self.root.attributes('-fullscreen', enabled)
        except tk.TclError as e:
            logger.warning("Fullscreen not available: %s", e)
            return
        self.fullscreen = enabled

    def _apply_background(self, color):
        self.background = color
        self.root.configure(bg=color)

        def apply_recursive(w):
            if isinstance(w, (tk.Frame, tk.Label, tk.Button, tk.Canvas)):
                w.configure(bg=color)
                if isinstance(w, tk.Button):
                    w.configure(activebackground=color, highlightbackground=color)
            for child in w.winfo_children():
                apply_recursive(child)

        apply_recursive(self.root)
