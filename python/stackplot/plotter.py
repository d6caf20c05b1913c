from typing import Dict, Optional, Sequence, Tuple
import ROOT
import os
import logging
from .collector import collect_histograms, read_file_list
from .config import HistConfig, load_color_config, load_hist_config, load_scale_config
from .constants import DEFAULT_BASE_DIR, DEFAULT_EXTRA_TEXT, DEFAULT_LUMI_TEXT, IMAGE_FORMATS, REPORT_FILE_NAME, Style
from .histogram import apply_hist_config
from .logger import package_logger
from .report import ReportWriter
from .sample import HistogramSet
from .stack import StackedPlot, build_stack
from .styles import PlotStyle, draw_cms_label


class Plotter:
    def __init__(self,
                 input_file_list: str,
                 color_config: str,
                 scale_config: str,
                 hist_config: str,
                 output_dir: str,
                 lumi_text: str = DEFAULT_LUMI_TEXT,
                 extra_text: str = DEFAULT_EXTRA_TEXT,
                 base_dir: str = DEFAULT_BASE_DIR,
                 image_formats: Sequence[str] = IMAGE_FORMATS,
                 style: Optional[PlotStyle] = None,
                 log_level: Optional[int] = logging.INFO):
        """
        Stack simulated samples against data for every histogram in a list of ROOT files.

        Args:
            input_file_list: Text file with one ROOT file path per line
            color_config: Color config file ('<sample> <kColor> + <offset>' per line)
            scale_config: Scale config file ('<sample> <factor>' per line)
            hist_config: Display config file ('<pattern> <rebin> <x label>' per line)
            output_dir: Plots and report go to <base_dir>/<output_dir>
            lumi_text: Text drawn at the top right of each plot
            extra_text: Text drawn below the CMS logo
            base_dir: Parent directory of output_dir
            image_formats: File extensions each plot is saved as
            style: Plot style, CMS TDR style by default
            log_level: Level of all package loggers
        """

        # Set up logger
        package_logger.set_level(log_level)
        self.logger = package_logger.get_logger("plotter")
        self.logger.info("Plotter initialized")

        # Suppress ROOT info messages
        ROOT.gROOT.SetBatch(True)
        ROOT.gErrorIgnoreLevel = ROOT.kWarning

        # Histograms created from here on are not attached to any file
        ROOT.TH1.AddDirectory(False)

        self.input_file_list = input_file_list
        self.color_config = color_config
        self.scale_config = scale_config
        self.hist_config = hist_config
        self.output_path = os.path.join(base_dir, output_dir)
        self.lumi_text = lumi_text
        self.extra_text = extra_text
        self.image_formats = tuple(image_formats)

        self.colors: Dict[str, int] = {}
        self.scales: Dict[str, float] = {}
        self.hist_configs: Dict[str, HistConfig] = {}
        self.histogram_set = HistogramSet()

        # Set CMS style
        self.style = style if style else PlotStyle()
        self.style.apply()


    def run(self) -> int:
        """Full pipeline: configs and ROOT files to stacked plots and integral report. Returns the number of plots."""

        # Load configs. Unreadable configs leave empty mappings.
        self.colors = load_color_config(self.color_config)
        self.scales = load_scale_config(self.scale_config)
        self.hist_configs = load_hist_config(self.hist_config)

        # Collect histograms
        paths = read_file_list(self.input_file_list)
        self.histogram_set = collect_histograms(paths)
        self.logger.info(f"Collected {len(self.histogram_set)} histograms from {len(paths)} files")

        # Rebin and relabel
        self.histogram_set.map(lambda h: apply_hist_config(h, self.hist_configs))

        # Create output directory
        if os.path.exists(self.output_path):
            self.logger.warning(f"Output directory {self.output_path} already exists. Plots will be saved in this directory.")
        os.makedirs(self.output_path, exist_ok=True)

        hist_names = self.histogram_set.histogram_names()
        self._warn_unplotted(hist_names)

        n_plots = 0
        with ReportWriter(os.path.join(self.output_path, REPORT_FILE_NAME)) as report:
            for hist_name in hist_names:
                plot = build_stack(hist_name, self.histogram_set, self.colors, self.scales)
                if plot is None:
                    continue
                self._make_plot(plot)
                report.write(plot)
                n_plots += 1

        self.logger.info(f"All plots created: {n_plots} plots in {self.output_path}")
        return n_plots


    def _warn_unplotted(self, hist_names) -> None:
        """Histograms missing from the first sample are not plotted. Say so."""
        if not self.histogram_set.samples():
            self.logger.warning("No simulated samples found. Nothing to plot.")
            return
        first_sample = self.histogram_set.samples()[0]
        for name in self.histogram_set.all_histogram_names():
            if name not in hist_names:
                self.logger.warning(f"Histogram {name} is not in the first sample {first_sample}. It will not be plotted.")


    def _make_plot(self, plot: StackedPlot) -> None:
        """Draw one stacked plot with its ratio panel and save it in every image format."""
        canvas_name = f"canvas_{plot.name}"
        canvas = ROOT.TCanvas(canvas_name, "Histogram Stacks", self.style.canvas_width, self.style.canvas_height)
        canvas.cd()

        upper_pad, lower_pad = self._configure_pads(canvas, plot.name)

        # Stack, data and legend go in the upper pad
        upper_pad.cd()
        stack = plot.make_stack()
        stack.Draw(Style.STACKED)
        stack.SetMaximum(plot.maximum)
        self._configure_axes(stack)

        if plot.data is not None:
            plot.data.Draw(f"{Style.SAME} {Style.POINTS}")

        legend = self._make_legend(plot)
        legend.Draw()

        draw_cms_label(upper_pad, extra_text=self.extra_text, lumi_text=self.lumi_text, style=self.style)

        # Ratio panel stays empty without data
        line = None
        if plot.ratio is not None:
            lower_pad.cd()
            self._configure_ratio_axes(plot.ratio)
            plot.ratio.Draw(Style.POINTS)
            line = self._draw_reference_line(plot.ratio)

        # Save canvas
        canvas.Update()
        for image_format in self.image_formats:
            output_file = os.path.join(self.output_path, f"{plot.name}.{image_format}")
            canvas.SaveAs(output_file)
            self.logger.info(f"Plot saved: {output_file}")
        canvas.Close()

        del line, legend, stack


    def _configure_pads(self, canvas: ROOT.TCanvas, hist_name: str) -> Tuple[ROOT.TPad, ROOT.TPad]:
        """Split the canvas into the stack pad (top) and the ratio pad (bottom)."""
        split = self.style.pad_split

        upper_pad = ROOT.TPad(f"upper_pad_{hist_name}", f"upper_pad_{hist_name}", 0, split, 1, 1)
        upper_pad.SetLeftMargin(0.16)
        upper_pad.SetRightMargin(0.05)
        upper_pad.SetTopMargin(0.1)
        upper_pad.SetBottomMargin(0.02)
        upper_pad.Draw()

        lower_pad = ROOT.TPad(f"lower_pad_{hist_name}", f"lower_pad_{hist_name}", 0, 0, 1, split)
        lower_pad.SetLeftMargin(0.16)
        lower_pad.SetRightMargin(0.05)
        lower_pad.SetTopMargin(0.03)
        lower_pad.SetBottomMargin(0.35)
        lower_pad.Draw()

        return upper_pad, lower_pad


    def _make_legend(self, plot: StackedPlot) -> ROOT.TLegend:
        legend = ROOT.TLegend(*self.style.legend_box)
        legend.SetBorderSize(0)
        legend.SetFillStyle(0)
        legend.SetTextFont(self.style.font)
        legend.SetTextSize(0.03)
        legend.SetMargin(0.2)
        for entry in plot.legend_entries:
            legend.AddEntry(entry.hist, entry.label, entry.option)
        return legend


    def _configure_axes(self, stack: ROOT.THStack) -> None:
        """Upper pad axes. X labels are drawn by the ratio pad."""
        if not stack.GetHistogram():
            self.logger.error(f"Stack {stack.GetName()} has no axes after drawing. Keeping default axis style.")
            return
        stack.GetXaxis().SetLabelSize(0)
        stack.GetXaxis().SetTitleSize(0)
        stack.GetYaxis().SetTitle("Events")
        stack.GetYaxis().SetTitleSize(0.06)
        stack.GetYaxis().SetTitleOffset(1.1)
        stack.GetYaxis().SetLabelSize(0.05)


    def _configure_ratio_axes(self, ratio: ROOT.TH1) -> None:
        """Ratio pad axes, sized for the smaller pad."""
        ratio.GetYaxis().SetTitleSize(0.12)
        ratio.GetYaxis().SetTitleOffset(0.5)
        ratio.GetYaxis().SetLabelSize(0.1)
        ratio.GetYaxis().SetNdivisions(505)

        ratio.GetXaxis().SetLabelSize(0.12)
        ratio.GetXaxis().SetTitleSize(0.12)
        ratio.GetXaxis().SetTitleOffset(1.0)


    def _draw_reference_line(self, ratio: ROOT.TH1) -> ROOT.TLine:
        """Red dashed line at ratio 1."""
        line = ROOT.TLine(ratio.GetXaxis().GetXmin(), 1.0, ratio.GetXaxis().GetXmax(), 1.0)
        line.SetLineStyle(2)
        line.SetLineColor(ROOT.kRed)
        line.SetLineWidth(2)
        line.Draw()
        return line
