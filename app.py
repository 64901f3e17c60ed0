# app.py
# Contains the main PatternMatcherApp GUI class.

import os
import time
import json
import queue
import sv_ttk
import threading
import tkinter as tk
import matplotlib.ticker as mticker
from matplotlib.figure import Figure
from tkinter import ttk, filedialog, messagebox
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from alphabet import DEFAULT_ALPHABET, DEFAULT_INDENT, PatternError
from algorithms import ALGORITHMS, NAIVE
from benchmark import DEMO_BASE, DEMO_PATTERNS, find_disagreements, run_all_algorithms, run_batch_analysis
from file_utils import extract_text
from render import format_match, hit_context
from utils import clean_to_alphabet, read_documents


# === MAIN APPLICATION CLASS ===

class PatternMatcherApp:

    ALGORITHMS = ALGORITHMS

    # --- File Locations ---
    BATCH_FOLDER = os.path.join("data", "texts")
    BATCH_REPORT_PATH = os.path.join("data", "batch_report.json")

    MAX_INDENT = 20

    def __init__(self, root):
        """Constructor for the main application."""
        self.root = root
        self.root.title("Pattern Matcher")
        self.root.geometry("1100x750")

        # --- Application State Variables ---
        self.base_filepath = ""
        self.base_text_content = ""
        self.performance_data = []
        self.batch_results_data = []
        self.batch_performance_data = {}  # For batch chart

        self.batch_queue = queue.Queue()
        self.batch_thread = None

        self.pattern_var = tk.StringVar(value=DEMO_PATTERNS[0])
        self.indent_var = tk.IntVar(value=DEFAULT_INDENT)
        self.case_sensitive_var = tk.BooleanVar(value=True)
        self.sort_var = tk.BooleanVar(value=True)
        self.selected_algorithm = tk.StringVar(value=NAIVE)

        # StringVars for Batch Summary
        self.batch_summary_docs = tk.StringVar(value="Documents Processed: --")
        self.batch_summary_time = tk.StringVar(value="Total Time: --")
        self.batch_summary_comps = {
            name: tk.StringVar(value=f"{name} Comps: --") for name in self.ALGORITHMS
        }

        # --- Main Layout ---
        self.main_paned_window = ttk.PanedWindow(root, orient=tk.HORIZONTAL)
        self.main_paned_window.pack(fill=tk.BOTH, expand=True)

        self.input_frame = ttk.Frame(self.main_paned_window, width=350, relief=tk.RIDGE)
        self.input_frame.pack_propagate(False)
        self.main_paned_window.add(self.input_frame, weight=1)

        self.output_frame = ttk.Frame(self.main_paned_window, width=750)
        self.main_paned_window.add(self.output_frame, weight=3)

        # --- Output Tabs ---
        self.notebook = ttk.Notebook(self.output_frame)
        self.notebook.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        self.tab_about = ttk.Frame(self.notebook)
        self.tab_results = ttk.Frame(self.notebook)
        self.tab_batch_results = ttk.Frame(self.notebook)
        self.tab_batch_chart = ttk.Frame(self.notebook)
        self.tab_performance_table = ttk.Frame(self.notebook)
        self.tab_performance_chart = ttk.Frame(self.notebook)
        self.tab_base_text = ttk.Frame(self.notebook)

        # --- Tab Order ---
        self.notebook.add(self.tab_about, text="About")
        self.notebook.add(self.tab_results, text="Matches")
        self.notebook.add(self.tab_batch_results, text="Batch Results")
        self.notebook.add(self.tab_batch_chart, text="Batch Chart")
        self.notebook.add(self.tab_performance_table, text="Performance Table")
        self.notebook.add(self.tab_performance_chart, text="Performance Chart")
        self.notebook.add(self.tab_base_text, text="Base Text")

        # --- Build Widgets ---
        self.create_input_widgets()
        self.create_results_tab_widgets()
        self.create_batch_results_tab_widgets()
        self.create_batch_chart_tab_widgets()
        self.create_performance_table_tab_widgets()
        self.create_performance_chart_tab_widgets()
        self.create_base_text_tab_widgets()
        self.create_about_tab_widgets()

        self.input_frame.grid_columnconfigure(0, weight=1)

        # --- Status Bar ---
        self.status_bar_frame = ttk.Frame(root, relief=tk.SUNKEN, padding="2 5")
        self.status_bar_frame.pack(side=tk.BOTTOM, fill=tk.X)
        self.status_label = ttk.Label(self.status_bar_frame, text="Ready.")
        self.status_label.pack(side=tk.LEFT)

        self.check_batch_queue()

    # --- GUI Widget Builders ---

    def create_input_widgets(self):
        """Populates the left-hand input frame with all controls."""
        self.input_frame.grid_propagate(False)

        # Group 1: Base Text
        base_frame = ttk.LabelFrame(self.input_frame, text="1. Base Text")
        base_frame.grid(row=0, column=0, padx=10, pady=(10, 5), sticky="nsew")
        base_frame.grid_columnconfigure((0, 1), weight=1)

        self.load_base_button = ttk.Button(base_frame, text="Load File", command=self.load_base_file)
        self.load_base_button.grid(row=0, column=0, padx=(10, 5), pady=10, sticky="ew")
        self.demo_button = ttk.Button(base_frame, text="Use Demo Text", command=self.load_demo_text)
        self.demo_button.grid(row=0, column=1, padx=(5, 10), pady=10, sticky="ew")
        self.base_filename_label = ttk.Label(base_frame, text="No text loaded.", wraplength=300)
        self.base_filename_label.grid(row=1, column=0, columnspan=2, padx=10, pady=(0, 10), sticky="w")

        # Group 2: Pattern
        pattern_frame = ttk.LabelFrame(self.input_frame, text="2. Pattern")
        pattern_frame.grid(row=1, column=0, padx=10, pady=5, sticky="nsew")
        pattern_frame.grid_columnconfigure(0, weight=1)

        self.pattern_entry = ttk.Entry(pattern_frame, textvariable=self.pattern_var)
        self.pattern_entry.grid(row=0, column=0, padx=10, pady=10, sticky="ew")

        # Group 3: Options
        options_frame = ttk.LabelFrame(self.input_frame, text="3. Options")
        options_frame.grid(row=2, column=0, padx=10, pady=5, sticky="nsew")
        options_frame.grid_columnconfigure(0, weight=1)

        self.case_sensitive_check = ttk.Checkbutton(
            options_frame,
            text="Case Sensitive Search",
            variable=self.case_sensitive_var
        )
        self.case_sensitive_check.grid(row=0, column=0, padx=10, pady=(10, 5), sticky="w")

        self.sort_check = ttk.Checkbutton(
            options_frame,
            text="Sort Hits by Accuracy",
            variable=self.sort_var
        )
        self.sort_check.grid(row=1, column=0, padx=10, pady=5, sticky="w")

        self.indent_label = ttk.Label(options_frame, text=f"Context Width: {DEFAULT_INDENT} symbols")
        self.indent_label.grid(row=2, column=0, padx=10, pady=(10, 5), sticky="w")

        self.indent_slider = ttk.Scale(
            options_frame,
            from_=0,
            to=self.MAX_INDENT,
            orient=tk.HORIZONTAL,
            variable=self.indent_var,
            command=self.update_indent_label
        )
        self.indent_slider.grid(row=3, column=0, padx=10, pady=(0, 10), sticky="ew")

        # Group 4: Actions
        action_frame = ttk.Frame(self.input_frame)
        action_frame.grid(row=3, column=0, padx=10, pady=(20, 10), sticky="sew")
        action_frame.grid_columnconfigure(0, weight=1)

        self.search_button = ttk.Button(
            action_frame, text="Run Search", command=self.run_analysis, style="Accent.TButton"
        )
        self.search_button.grid(row=0, column=0, padx=5, pady=5, sticky="ew")

        self.batch_button = ttk.Button(
            action_frame,
            text="Run Batch Analysis",
            command=self.start_batch_analysis_thread
        )
        self.batch_button.grid(row=1, column=0, padx=5, pady=5, sticky="ew")

        # --- Row Configuration ---
        self.input_frame.grid_rowconfigure(0, weight=0)
        self.input_frame.grid_rowconfigure(1, weight=0)
        self.input_frame.grid_rowconfigure(2, weight=0)
        self.input_frame.grid_rowconfigure(3, weight=1)

    def update_indent_label(self, value):
        # ttk.Scale hands over floats
        self.indent_var.set(int(float(value)))
        self.indent_label.config(text=f"Context Width: {self.indent_var.get()} symbols")

    def create_results_tab_widgets(self):
        top_frame = ttk.Frame(self.tab_results)
        top_frame.pack(fill="x", padx=10, pady=10)

        self.hits_label = ttk.Label(
            top_frame, text="Hits: --", font=('TkDefaultFont', 14, 'bold')
        )
        self.hits_label.pack(side=tk.LEFT, padx=10)

        self.algorithm_dropdown = ttk.Combobox(
            top_frame, textvariable=self.selected_algorithm,
            values=list(self.ALGORITHMS), state="readonly", width=28
        )
        self.algorithm_dropdown.pack(side=tk.LEFT, padx=10)
        self.algorithm_dropdown.bind("<<ComboboxSelected>>", self.show_selected_hits)

        self.export_button = ttk.Button(
            top_frame,
            text="Export Report (.txt)",
            command=self.export_single_report,
            state=tk.DISABLED
        )
        self.export_button.pack(side=tk.RIGHT, padx=10)

        self.agreement_label = ttk.Label(self.tab_results, text="", wraplength=700)
        self.agreement_label.pack(fill="x", padx=20)

        self.hits_table = ttk.Treeview(
            self.tab_results, columns=("Start", "End", "Accuracy", "Context"), show="headings"
        )
        self.hits_table.heading("Start", text="Start",
                                command=lambda: self.sort_treeview_column(self.hits_table, "Start", False))
        self.hits_table.heading("End", text="End")
        self.hits_table.heading("Accuracy", text="Accuracy (%)")
        self.hits_table.heading("Context", text="Context")
        self.hits_table.column("Start", width=70, anchor=tk.E)
        self.hits_table.column("End", width=70, anchor=tk.E)
        self.hits_table.column("Accuracy", width=100, anchor=tk.E)
        self.hits_table.column("Context", width=450)
        self.hits_table.pack(fill="both", expand=True, padx=10, pady=10)

    def create_batch_results_tab_widgets(self):
        """Populates the 'Batch Results' tab with summary and Treeview."""

        summary_frame = ttk.LabelFrame(self.tab_batch_results, text="Batch Summary")
        summary_frame.pack(side=tk.TOP, fill="x", padx=10, pady=(10, 5))
        summary_frame.grid_columnconfigure((0, 1), weight=1)

        ttk.Label(summary_frame, textvariable=self.batch_summary_docs, font=('TkDefaultFont', 10, 'bold')).grid(
            row=0, column=0, padx=10, pady=5, sticky="w")
        ttk.Label(summary_frame, textvariable=self.batch_summary_time, font=('TkDefaultFont', 10, 'bold')).grid(
            row=0, column=1, padx=10, pady=5, sticky="w")
        for row, var in enumerate(self.batch_summary_comps.values(), start=1):
            ttk.Label(summary_frame, textvariable=var).grid(
                row=row, column=0, columnspan=2, padx=10, pady=(0, 5), sticky="w")

        ranked_frame = ttk.LabelFrame(self.tab_batch_results, text="Documents")
        ranked_frame.pack(side=tk.TOP, fill="both", expand=True, padx=10, pady=(5, 10))

        info_label = ttk.Label(ranked_frame,
                               text=f"Hits per document from the '{self.BATCH_FOLDER}' folder. Click headers to sort.",
                               font=('TkDefaultFont', 9, 'italic'))
        info_label.pack(side=tk.TOP, fill="x", padx=10, pady=(10, 5))

        self.batch_table = ttk.Treeview(
            ranked_frame, columns=("Document", "Hits", "Note"), show="headings"
        )
        self.batch_table.heading("Document", text="Document",
                                 command=lambda: self.sort_treeview_column(self.batch_table, "Document", False))
        self.batch_table.heading("Hits", text="Hits",
                                 command=lambda: self.sort_treeview_column(self.batch_table, "Hits", True))
        self.batch_table.heading("Note", text="Note")
        self.batch_table.column("Document", width=300)
        self.batch_table.column("Hits", width=100, anchor=tk.E)
        self.batch_table.column("Note", width=300)
        self.batch_table.pack(fill="both", expand=True, padx=10, pady=(5, 10))

    def create_batch_chart_tab_widgets(self):
        """Populates the 'Batch Chart' tab with a Matplotlib canvas."""
        self.batch_chart_frame = ttk.Frame(self.tab_batch_chart)
        self.batch_chart_frame.pack(fill="both", expand=True, padx=10, pady=10)
        self.batch_fig = Figure(figsize=(5, 4), dpi=100)
        self.batch_ax1 = self.batch_fig.add_subplot(111)
        self.batch_canvas = FigureCanvasTkAgg(self.batch_fig, master=self.batch_chart_frame)
        self.batch_canvas.draw()
        self.batch_canvas.get_tk_widget().pack(fill="both", expand=True)
        self.batch_ax1.set_title("Batch Performance (Total Time & Comps)")
        self.batch_ax1.set_ylabel("Total Execution Time (ms)")
        self.batch_fig.tight_layout()

    def create_performance_table_tab_widgets(self):
        """Populates the 'Performance Table' tab with a Treeview."""
        self.perf_table = ttk.Treeview(
            self.tab_performance_table, columns=("Algorithm", "Time", "Comparisons", "Hits"), show="headings"
        )
        self.perf_table.heading("Algorithm", text="Algorithm")
        self.perf_table.heading("Time", text="Execution Time (ms)")
        self.perf_table.heading("Comparisons", text="Total Comparisons")
        self.perf_table.heading("Hits", text="Hits")
        self.perf_table.column("Algorithm", width=220)
        self.perf_table.column("Time", width=150, anchor=tk.E)
        self.perf_table.column("Comparisons", width=150, anchor=tk.E)
        self.perf_table.column("Hits", width=80, anchor=tk.E)
        self.perf_table.pack(fill="both", expand=True, padx=10, pady=10)

    def create_performance_chart_tab_widgets(self):
        """Populates the 'Performance Chart' tab with a Matplotlib canvas."""
        self.chart_frame = ttk.Frame(self.tab_performance_chart)
        self.chart_frame.pack(fill="both", expand=True, padx=10, pady=10)
        self.fig = Figure(figsize=(5, 4), dpi=100)
        self.ax1 = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=self.chart_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)
        self.ax1.set_title("Single Search Performance Comparison")
        self.ax1.set_ylabel("Execution Time (ms)")
        self.fig.tight_layout()

    def _theme_colors(self):
        if sv_ttk.get_theme() == "dark":
            return "#2b2b2b", "#ffffff"
        return "#ffffff", "#000000"

    def _make_text_widget(self, parent, **kwargs):
        bg_color, fg_color = self._theme_colors()
        return tk.Text(
            parent,
            wrap=tk.WORD,
            bg=bg_color,
            fg=fg_color,
            relief=tk.FLAT,
            insertbackground=fg_color,
            **kwargs
        )

    def create_base_text_tab_widgets(self):
        """Populates the 'Base Text' tab with a scrollable Text widget."""
        self.base_text_widget = self._make_text_widget(self.tab_base_text, state=tk.DISABLED)

        self.base_text_scrollbar = ttk.Scrollbar(
            self.tab_base_text, orient=tk.VERTICAL, command=self.base_text_widget.yview
        )
        self.base_text_widget.configure(yscrollcommand=self.base_text_scrollbar.set)
        self.base_text_scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.base_text_widget.pack(fill="both", expand=True, padx=5, pady=5)

    def create_about_tab_widgets(self):
        """Populates the 'About' tab with help text."""
        about_text_content = f"""
        Pattern Matcher
        ----------------------------------

        Finds every occurrence of a pattern in a base text with several exact string-matching
        algorithms and compares their cost.

        ALGORITHMS:
        1.  Naive Scan: checks the pattern against every possible position in the text.
        2.  Rabin-Karp: compares a rolling hash of each window with the pattern hash. Hash
            matches are NOT confirmed, so collisions can appear as hits.
        3.  Rabin-Karp (verified): the same rolling hash, with every hash match confirmed
            symbol by symbol.
        4.  Knuth-Morris-Pratt (KMP): runs the prefix function over pattern + delimiter + text.
        5.  Boyer-Moore (bad character): compares right to left and skips ahead using the
            bad-character table.

        COMPARISONS:
        -   Symbol comparisons for every algorithm; Rabin-Karp also counts one per hash check.
        -   Any algorithm whose hits differ from the Naive Scan is reported on the Matches tab.

        INPUT:
        -   Text is cleaned to printable ASCII plus line breaks before searching.
        -   Use "Case Sensitive Search" to control matching behavior.
        -   "Context Width" sets how many symbols are shown around each hit (default {DEFAULT_INDENT}).

        FILE LOCATIONS:
        -   Batch documents (.txt, .pdf, .docx): `{self.BATCH_FOLDER}/`
        -   Batch Report: saved to `{self.BATCH_REPORT_PATH}`
        """

        text_frame = ttk.Frame(self.tab_about, padding=10)
        text_frame.pack(fill=tk.BOTH, expand=True)

        about_text = self._make_text_widget(
            text_frame, state=tk.NORMAL, font=('TkDefaultFont', 10), padx=5
        )
        about_text.insert("1.0", about_text_content)
        about_text.config(state=tk.DISABLED)

        about_scrollbar = ttk.Scrollbar(text_frame, orient=tk.VERTICAL, command=about_text.yview)
        about_text.configure(yscrollcommand=about_scrollbar.set)

        about_scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        about_text.pack(fill="both", expand=True, padx=5, pady=5)

    # --- Core Logic & Event Handlers ---

    def set_base_text(self, text, label):
        self.base_text_content = clean_to_alphabet(text, DEFAULT_ALPHABET)
        dropped = len(text) - len(self.base_text_content)
        note = f" ({dropped} unsupported symbols removed)" if dropped > 0 else ""
        self.base_filename_label.config(text=f"Loaded: {label}{note}")

        self.base_text_widget.config(state=tk.NORMAL)
        self.base_text_widget.delete("1.0", tk.END)
        self.base_text_widget.insert("1.0", self.base_text_content)
        self.base_text_widget.config(state=tk.DISABLED)
        self.export_button.config(state=tk.DISABLED)

    def load_demo_text(self):
        self.base_filepath = ""
        self.set_base_text(DEMO_BASE, "demo text")

    def load_base_file(self):
        """Event handler for the 'Load File' button."""
        filepath = filedialog.askopenfilename(
            title="Select Text File",
            filetypes=(("Text Files", "*.txt"), ("PDF Files", "*.pdf"),
                       ("Word Documents", "*.docx"), ("All Files", "*.*"))
        )
        if not filepath: return

        try:
            text = extract_text(filepath)
        except ValueError as e:
            messagebox.showwarning("Warning", str(e)); return

        if text:
            self.base_filepath = filepath
            self.set_base_text(text, os.path.basename(filepath))
        else:
            self.base_filename_label.config(text="Failed to read text from file.")

    def run_analysis(self):
        """Event handler for the 'Run Search' button. (Runs on main thread)"""
        self.status_label.config(text="Searching...")
        self.root.update_idletasks()
        if not self.base_text_content:
            messagebox.showerror("Error", "Please load a base text first."); self.status_label.config(text="Error. Ready."); return

        is_case_sensitive = self.case_sensitive_var.get()
        text_to_search = self.base_text_content if is_case_sensitive else self.base_text_content.lower()
        pattern = self.pattern_var.get()
        pattern_to_find = pattern if is_case_sensitive else pattern.lower()

        try:
            self.performance_data = run_all_algorithms(
                text_to_search, pattern_to_find,
                sort_by_accuracy=self.sort_var.get(), indent=self.indent_var.get()
            )
        except PatternError as e:
            messagebox.showerror("Error", f"Cannot search for {pattern!r}:\n{e}")
            self.status_label.config(text="Error. Ready."); return

        disagreements = find_disagreements(self.performance_data)
        if disagreements:
            lines = [f"{name}: extra {d['extra']}, missing {d['missing']}" for name, d in disagreements.items()]
            self.agreement_label.config(text="Differs from Naive Scan -> " + "; ".join(lines))
        else:
            self.agreement_label.config(text="All algorithms agree with the Naive Scan.")

        self.show_selected_hits()
        self.update_performance_table()
        self.update_performance_chart()
        self.notebook.select(self.tab_results)
        self.export_button.config(state=tk.NORMAL)
        self.status_label.config(text="Search complete. Ready.")

    def selected_match(self):
        for result in self.performance_data:
            if result["name"] == self.selected_algorithm.get():
                return result["match"]
        return None

    def show_selected_hits(self, event=None):
        """Fills the hits table from the algorithm picked in the dropdown."""
        for item in self.hits_table.get_children(): self.hits_table.delete(item)
        match = self.selected_match()
        if match is None:
            self.hits_label.config(text="Hits: --"); return

        self.hits_label.config(text=f"Hits: {len(match.hits)}")
        for hit in match.hits:
            prefix, suffix = hit_context(match, hit)
            context = f"{prefix}<{match.base[hit.start:hit.end]}>{suffix}"
            self.hits_table.insert("", tk.END, values=(
                hit.start, hit.end - 1, f"{hit.accuracy * 100:.1f}", context.replace("\n", " ")
            ))

    def export_single_report(self):
        """Exports the rendered matches of every algorithm plus their performance to a text report."""
        if not self.performance_data:
            messagebox.showinfo("No Data", "No search data to export.")
            return
        try:
            report_content = "===================================\n"
            report_content += "        PATTERN MATCHER REPORT\n"
            report_content += "===================================\n"
            report_content += f"Source: {self.base_filepath or 'demo text'}\n\n"
            for result in self.performance_data:
                report_content += f"--- {result['name'].upper()} ---\n"
                report_content += format_match(result["match"]) + "\n"
            report_content += "--- ALGORITHM PERFORMANCE ---\n"
            report_content += f"{'Algorithm':<30} | {'Time (ms)':<15} | {'Comparisons':<15} | {'Hits':<6}\n"
            report_content += "-"*75 + "\n"
            for result in self.performance_data:
                report_content += (f"{result['name']:<30} | {result['time']:<15.4f} | "
                                   f"{result['comparisons']:<15,} | {result['hits']:<6}\n")

            save_path = filedialog.asksaveasfilename(
                title="Save Report",
                initialfile="Pattern_Report.txt",
                defaultextension=".txt",
                filetypes=[("Text Files", "*.txt"), ("All Files", "*.*")]
            )
            if not save_path: return
            with open(save_path, "w", encoding="utf-8") as f:
                f.write(report_content)
            messagebox.showinfo("Export Successful", f"Report saved to:\n{save_path}")
        except OSError as e:
            messagebox.showerror("Export Error", f"Could not export report: {e}")

    # --- THREADING FUNCTIONS ---

    def start_batch_analysis_thread(self):
        """Validates inputs and starts the batch analysis worker thread."""
        if self.batch_thread and self.batch_thread.is_alive():
            messagebox.showwarning("In Progress", "Batch analysis is already running.")
            return
        pattern = self.pattern_var.get()
        if not pattern:
            messagebox.showerror("Error", "Please enter a pattern first.")
            return

        self.status_label.config(text="Running batch analysis... This may take a while.")
        self.batch_button.config(state=tk.DISABLED)
        self.search_button.config(state=tk.DISABLED)

        self.batch_thread = threading.Thread(
            target=self.run_batch_analysis_worker,
            args=(pattern, self.case_sensitive_var.get(), self.indent_var.get(), self.sort_var.get()),
            daemon=True
        )
        self.batch_thread.start()

    def run_batch_analysis_worker(self, pattern, case_sensitive, indent, sort_by_accuracy):
        """
        This is the main batch logic. Runs on a WORKER thread.
        Processes documents sequentially, one by one.
        """
        try:
            batch_start_time = time.perf_counter()
            if not os.path.exists(self.BATCH_FOLDER): raise FileNotFoundError(f"Documents folder not found: {self.BATCH_FOLDER}")
            documents = read_documents(self.BATCH_FOLDER)
            if not documents: raise FileNotFoundError(f"No readable documents found in {self.BATCH_FOLDER}")

            report, aggregate = run_batch_analysis(
                documents, pattern, case_sensitive=case_sensitive,
                indent=indent, sort_by_accuracy=sort_by_accuracy
            )

            total_time_taken = time.perf_counter() - batch_start_time
            batch_ui_data = []
            for entry in report:
                if "skipped" in entry:
                    batch_ui_data.append({"document": entry["document"], "hits": 0, "note": entry["skipped"]})
                else:
                    note = "disagreement: " + ", ".join(entry["disagreements"]) if entry["disagreements"] else ""
                    batch_ui_data.append({"document": entry["document"], "hits": len(entry["hits"]), "note": note})

            summary_data = {
                "total_docs": len(report),
                "total_time_s": total_time_taken,
                "agg_perf": aggregate
            }

            os.makedirs(os.path.dirname(self.BATCH_REPORT_PATH), exist_ok=True)
            with open(self.BATCH_REPORT_PATH, "w", encoding="utf-8") as f:
                json.dump({"pattern": pattern, "case_sensitive": case_sensitive, "documents": report}, f, indent=4)

            self.batch_queue.put({
                "status": "SUCCESS",
                "ui_data": batch_ui_data,
                "report_path": self.BATCH_REPORT_PATH,
                "summary": summary_data
            })
        except Exception as e:
            self.batch_queue.put({"status": "ERROR", "message": str(e)})

    def check_batch_queue(self):
        """Checks the queue for messages from the worker thread."""
        try:
            result = self.batch_queue.get(block=False)
            if result["status"] == "SUCCESS":

                summary = result["summary"]
                self.batch_summary_docs.set(f"Documents Processed: {summary['total_docs']}")
                self.batch_summary_time.set(f"Total Time: {summary['total_time_s']:.2f} s")

                self.batch_performance_data = summary['agg_perf']
                for name, var in self.batch_summary_comps.items():
                    var.set(f"{name} Comps: {self.batch_performance_data[name]['comps']:,}")

                self.batch_results_data = result["ui_data"]
                self.update_batch_results_tab()
                self.update_batch_chart()
                self.notebook.select(self.tab_batch_results)
                messagebox.showinfo(
                    "Batch Analysis Complete",
                    f"Document results updated.\nFull performance report saved to:\n{result['report_path']}"
                )
                self.status_label.config(text="Batch analysis complete. Ready.")

            elif result["status"] == "ERROR":
                messagebox.showerror("Batch Analysis Error", result["message"])
                self.status_label.config(text="Error during batch analysis. Ready.")

            self.batch_button.config(state=tk.NORMAL)
            self.search_button.config(state=tk.NORMAL)
        except queue.Empty:
            pass  # No message
        finally:
            self.root.after(100, self.check_batch_queue)

    # --- END THREADING FUNCTIONS ---

    def update_performance_table(self):
        """Refreshes the 'Performance Table' tab with new data."""
        for item in self.perf_table.get_children(): self.perf_table.delete(item)
        for result in self.performance_data:
            self.perf_table.insert("", tk.END, values=(
                result['name'], f"{result['time']:.4f}", f"{result['comparisons']:,}", result['hits']
            ))

    def draw_performance(self, fig, ax1, canvas, names, times, comparisons, title, time_label):
        """Bar chart of times with comparisons on a twin axis."""
        ax1.clear()
        for extra_ax in fig.axes[1:]:
            extra_ax.remove()

        bg_color, fg_color = self._theme_colors()
        fig.patch.set_facecolor(bg_color)
        ax1.set_facecolor(bg_color)
        ax1.tick_params(axis='x', colors=fg_color)
        ax1.spines['left'].set_color(fg_color)
        ax1.spines['bottom'].set_color(fg_color)
        ax1.spines['top'].set_color(bg_color)
        ax1.spines['right'].set_color(bg_color)

        if not names:
            ax1.set_title("No Performance Data to Display", color=fg_color)
            ax1.tick_params(axis='y', colors=fg_color)
            canvas.draw()
            return

        bar_color = 'blue'
        ax1.bar(names, times, color=bar_color, label=time_label)
        ax1.set_ylabel(time_label, color=bar_color)
        ax1.tick_params(axis='y', labelcolor=bar_color, colors=fg_color)
        ax1.tick_params(axis='x', labelrotation=15)
        ax1.set_title(title, color=fg_color)

        ax2 = ax1.twinx()
        ax2.plot(names, comparisons, color='red', marker='o', linestyle='--', label='Comparisons')
        ax2.set_ylabel('Total Comparisons', color='red')
        ax2.tick_params(axis='y', labelcolor='red', colors='red')

        # --- Force integer ticks on the Y-axis ---
        ax2.yaxis.set_major_locator(mticker.MaxNLocator(integer=True))
        ax2.yaxis.set_major_formatter(
            mticker.FuncFormatter(lambda x, p: format(int(x), ','))
        )

        ax2.spines['left'].set_color(bg_color)
        ax2.spines['bottom'].set_color(bg_color)
        ax2.spines['top'].set_color(bg_color)
        ax2.spines['right'].set_color('red')

        fig.tight_layout()
        canvas.draw()

    def update_performance_chart(self):
        """Refreshes the 'Performance Chart' tab with new data."""
        self.draw_performance(
            self.fig, self.ax1, self.canvas,
            [r['name'] for r in self.performance_data],
            [r['time'] for r in self.performance_data],
            [r['comparisons'] for r in self.performance_data],
            "Single Search Performance Comparison", "Execution Time (ms)"
        )

    def update_batch_chart(self):
        """Refreshes the 'Batch Chart' tab with aggregate data."""
        algo_names = list(self.batch_performance_data.keys())
        self.draw_performance(
            self.batch_fig, self.batch_ax1, self.batch_canvas,
            algo_names,
            [self.batch_performance_data[algo]["time"] for algo in algo_names],
            [self.batch_performance_data[algo]["comps"] for algo in algo_names],
            "Batch Performance (Total Time & Comps)", "Total Execution Time (ms)"
        )

    def update_batch_results_tab(self):
        """Refreshes the 'Batch Results' tab with new data, sorted by hit count."""
        for item in self.batch_table.get_children(): self.batch_table.delete(item)
        sorted_data = sorted(self.batch_results_data, key=lambda x: x['hits'], reverse=True)
        for result in sorted_data:
            self.batch_table.insert("", tk.END, values=(
                result['document'], result['hits'], result['note']
            ))

    def sort_treeview_column(self, tv, col, reverse):
        """Helper to sort a Treeview column when the header is clicked."""
        l = [(tv.set(k, col), k) for k in tv.get_children('')]
        try: l.sort(key=lambda t: float(t[0]), reverse=reverse)
        except ValueError: l.sort(key=lambda t: t[0], reverse=reverse)
        for index, (val, k) in enumerate(l):
            tv.move(k, '', index)
        tv.heading(col, command=lambda: self.sort_treeview_column(tv, col, not reverse))
