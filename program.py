import logging
import os

import numpy as np
import tkinter as tk

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure
from tkinter import ttk, filedialog, messagebox, simpledialog

from geometry import PointSet
from hull_builder import HullBuilder, HullError, convex_hull
from visualization import HullPlotter, setup_screen_axes

logger = logging.getLogger(__name__)

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 400
CANVAS_MARGIN = 20
ANIMATION_INTERVAL_MS = 300
DEFAULT_GENERATED_POINTS = 20


def read_points_file(filename: str) -> list[tuple[float, float]]:
    """
    Read points from a text file: number of points on the first line,
    then one point per line as two numbers separated by whitespace.
    """
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        n = int(f.readline().strip())
        for _ in range(n):
            line = f.readline().strip()
            if line:
                x, y = map(float, line.split())
                points.append((x, y))
    return points


class ConvexHullGUI:
    def __init__(self, root):
        self.root = root
        self.root.title("Convex hull: Graham scan")

        self.ps = PointSet()
        self.builder: HullBuilder | None = None
        self.animation_id = None

        self.setup_ui()
        self.update_buttons()

    def setup_ui(self):
        style = ttk.Style()
        style.theme_use('clam')

        toolbar = ttk.Frame(self.root)
        toolbar.pack(side=tk.TOP, fill=tk.X, padx=5, pady=2)

        ttk.Button(toolbar, text="📂 Открыть", command=self.load_file).pack(side=tk.LEFT, padx=2)
        ttk.Button(toolbar, text="🎲 Генерировать", command=self.generate_points).pack(side=tk.LEFT, padx=2)
        ttk.Button(toolbar, text="Сбросить", command=self.clear_data).pack(side=tk.LEFT, padx=2)
        ttk.Separator(toolbar, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=5)

        self.start_button = ttk.Button(toolbar, text="Старт", command=self.start)
        self.start_button.pack(side=tk.LEFT, padx=2)
        self.step_button = ttk.Button(toolbar, text="Шаг", command=self.step)
        self.step_button.pack(side=tk.LEFT, padx=2)
        self.animate_button = ttk.Button(toolbar, text="▶️ Анимация", command=self.animate)
        self.animate_button.pack(side=tk.LEFT, padx=2)
        self.stop_button = ttk.Button(toolbar, text="⏹ Стоп", command=self.stop_animation)
        self.stop_button.pack(side=tk.LEFT, padx=2)
        ttk.Separator(toolbar, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=5)

        ttk.Button(toolbar, text="Результат", command=self.show_result).pack(side=tk.LEFT, padx=2)
        self.keep_collinear_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(
            toolbar,
            text="Оставлять точки на рёбрах",
            variable=self.keep_collinear_var,
            command=self.abort_computation,
        ).pack(side=tk.LEFT, padx=5)

        self.fig = Figure(figsize=(CANVAS_WIDTH / 100, CANVAS_HEIGHT / 100))
        self.ax = self.fig.add_subplot(111)
        setup_screen_axes(self.ax, CANVAS_WIDTH, CANVAS_HEIGHT)
        self.plotter = HullPlotter(self.ax)

        self.canvas = FigureCanvasTkAgg(self.fig, master=self.root)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True, padx=5, pady=5)
        self.canvas.mpl_connect('button_press_event', self.on_click)

        self.status_bar = ttk.Label(self.root, text="Кликните, чтобы добавить точку", relief=tk.SUNKEN)
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

    def on_click(self, event):
        if event.inaxes is not self.ax or event.xdata is None or event.ydata is None:
            return

        self.abort_computation()
        point = self.ps.add_new_point(float(event.xdata), float(event.ydata))
        self.plotter.add_vertex(point)
        self.canvas.draw_idle()
        self.update_status(f"Добавлена точка {point}, всего {self.ps.size()}")

    def add_points(self, coords):
        self.abort_computation()
        for x, y in coords:
            self.plotter.add_vertex(self.ps.add_new_point(x, y))
        self.canvas.draw_idle()

    def load_file(self):
        filename = filedialog.askopenfilename(
            title="Выберите файл с точками",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )

        if not filename:
            return

        try:
            coords = read_points_file(filename)
        except (OSError, ValueError) as e:
            logger.exception("Failed to load %s", filename)
            messagebox.showerror("Ошибка", f"Не удалось загрузить файл:\n{str(e)}")
            return

        self.add_points(coords)
        logger.info("Loaded %d points from %s", len(coords), filename)
        self.update_status(f"Загружено {len(coords)} точек из {os.path.basename(filename)}")

    def generate_points(self):
        n = simpledialog.askinteger(
            "Генерация точек",
            "Количество точек:",
            initialvalue=DEFAULT_GENERATED_POINTS,
            minvalue=1,
            maxvalue=10_000,
            parent=self.root,
        )
        if not n:
            return

        xs = np.random.uniform(CANVAS_MARGIN, CANVAS_WIDTH - CANVAS_MARGIN, n)
        ys = np.random.uniform(CANVAS_MARGIN, CANVAS_HEIGHT - CANVAS_MARGIN, n)
        self.add_points(zip(xs.tolist(), ys.tolist()))
        logger.info("Generated %d points", n)
        self.update_status(f"Сгенерировано {n} точек")

    def start(self):
        self.abort_computation()
        self.plotter.reset()
        self.builder = HullBuilder(self.ps, observer=self.plotter, keep_collinear=self.keep_collinear_var.get())
        try:
            self.builder.start()
        except HullError as e:
            self.builder = None
            messagebox.showwarning("Предупреждение", f"Нечего строить:\n{str(e)}")
            return

        logger.info("Started hull construction on %d points", self.ps.size())
        self.canvas.draw_idle()
        self.update_buttons()
        self.update_progress()

    def step(self) -> bool:
        if self.builder is None:
            return True

        done = self.builder.step()
        if self.builder.upper_chain_snapshot and self.plotter.upper_chain_size is None:
            self.plotter.upper_chain_size = len(self.builder.upper_chain_snapshot) - 1
            self.plotter.on_hull_changed(self.builder.hull)

        if done:
            self.stop_animation()
        self.canvas.draw_idle()
        self.update_buttons()
        self.update_progress()
        return done

    def animate(self):
        if self.builder is None or self.builder.is_done():
            self.start()
            if self.builder is None:
                return
        self.stop_animation()
        self.animation_id = self.root.after(ANIMATION_INTERVAL_MS, self._animation_tick)
        self.update_buttons()

    def _animation_tick(self):
        self.animation_id = None
        if not self.step():
            self.animation_id = self.root.after(ANIMATION_INTERVAL_MS, self._animation_tick)
        self.update_buttons()

    def stop_animation(self):
        if self.animation_id is not None:
            self.root.after_cancel(self.animation_id)
            self.animation_id = None
        self.update_buttons()

    def abort_computation(self):
        self.stop_animation()
        if self.builder is not None:
            self.builder.cancel()
            self.builder = None
            self.plotter.reset()
            self.canvas.draw_idle()
        self.update_buttons()

    def show_result(self):
        self.abort_computation()
        self.plotter.reset()
        try:
            hull = convex_hull(self.ps, keep_collinear=self.keep_collinear_var.get())
        except HullError as e:
            messagebox.showwarning("Предупреждение", f"Нечего строить:\n{str(e)}")
            return

        self.plotter.upper_chain_size = None
        for p in hull:
            self.plotter.on_vertex_joined_hull(p.id)
        self.plotter.on_hull_changed(list(hull) + [hull[0]])
        self.canvas.draw_idle()

        logger.info("Convex hull has %d vertices", hull.size())
        self.update_status(f"Выпуклая оболочка: {hull.size()} вершин")
        messagebox.showinfo("Выпуклая оболочка", str(hull))

    def clear_data(self):
        self.abort_computation()
        self.ps.reset()
        self.plotter.clear()
        self.canvas.draw_idle()
        self.update_status("Данные очищены")

    def update_buttons(self):
        running = self.builder is not None and not self.builder.is_done()
        animating = self.animation_id is not None
        self.step_button.configure(state=tk.NORMAL if running and not animating else tk.DISABLED)
        self.animate_button.configure(state=tk.DISABLED if animating else tk.NORMAL)
        self.stop_button.configure(state=tk.NORMAL if animating else tk.DISABLED)

    def update_progress(self):
        if self.builder is None:
            return
        b = self.builder
        self.update_status(
            f"Фаза: {b.phase.value}, кандидат: {b.cursor}/{self.ps.size()}, "
            f"вершин в оболочке: {len(b.hull)}, шагов: {b.steps}"
        )

    def update_status(self, message):
        self.status_bar.config(text=message)
        self.root.update_idletasks()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    root = tk.Tk()
    _ = ConvexHullGUI(root)
    root.mainloop()
